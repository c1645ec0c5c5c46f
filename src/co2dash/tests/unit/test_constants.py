"""Unit tests for CO2Dash constants.

Validates constant values across the constant groups for type correctness,
range validity, and consistency.
"""

import unittest

from co2dash import constants
from co2dash.constants.config import ConfigConstants
from co2dash.constants.graph import GraphConstants
from co2dash.constants.styles import UIStyleConstants


class TestConstants(unittest.TestCase):
    """Tests for validating CO2Dash constants."""

    def test_config_constants(self):
        """Validate ConfigConstants properties."""
        self.assertIsInstance(ConfigConstants.DEFAULT_CONFIG, dict)
        self.assertEqual(
            set(ConfigConstants.DEFAULT_CONFIG),
            {"history_url", "request_timeout", "window_width", "window_height", "log_level"},
        )
        self.assertIn(ConfigConstants.DEFAULT_LOG_LEVEL, ConfigConstants.LOG_LEVEL_CHOICES)

    def test_graph_constants(self):
        """Validate the window and axis constants."""
        self.assertEqual(GraphConstants.DEFAULT_WINDOW_SAMPLES, 60)
        self.assertEqual(GraphConstants.MIN_WINDOW_GAP, 2)
        self.assertEqual(GraphConstants.MIN_SERIES_LENGTH, 3)
        self.assertEqual(GraphConstants.Y_AXIS_MIN_PPM, 440.0)
        self.assertEqual(GraphConstants.Y_AXIS_MAX_PPM, 2000.0)

    def test_api_constants(self):
        """Validate ApiConstants properties."""
        self.assertTrue(constants.api.HISTORY_URL.startswith("https://"))
        self.assertLessEqual(constants.api.MIN_TIMEOUT, constants.api.DEFAULT_TIMEOUT)
        self.assertLessEqual(constants.api.DEFAULT_TIMEOUT, constants.api.MAX_TIMEOUT)
        self.assertEqual(constants.api.REQUIRED_FIELDS, ("time", "status", "qi", "tvoc", "co2"))

    def test_colors_are_hex(self):
        """All chart colours are #RRGGBB strings."""
        for value in (constants.color.GRID_LINE_LIGHT, constants.color.GRID_LINE_DARK,
                      constants.color.SERIES_LINE_LIGHT, constants.color.SERIES_LINE_DARK):
            self.assertTrue(value.startswith("#") and len(value) == 7, value)

    def test_style_colours_validated_on_instantiation(self):
        """A malformed style colour is rejected when the group is built."""
        class BrokenStyles(UIStyleConstants):
            WINDOW_BG_DARK = "dark grey"

        UIStyleConstants()
        with self.assertRaises(ValueError):
            BrokenStyles()

    def test_strings(self):
        """Validate the title prefixes used by the dashboard."""
        self.assertEqual(constants.strings.TITLE_LOADING_PREFIX, "Loading - ")
        self.assertEqual(constants.strings.TITLE_ERROR_PREFIX, "Error - ")
        self.assertEqual(constants.app.TITLE_BASE, "CO2")

    def test_log_constants(self):
        """Validate logging constants."""
        self.assertTrue(constants.logs.LOGGER_NAME)
        self.assertGreater(constants.logs.MAX_LOG_SIZE, 0)
        self.assertGreaterEqual(constants.logs.LOG_BACKUP_COUNT, 0)


if __name__ == "__main__":
    unittest.main()
