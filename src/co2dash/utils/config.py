"""
Configuration management for CO2Dash.

This module provides a ConfigManager for loading and validating application
settings from an optional JSON file. The file is only ever read: the dashboard
keeps no state between runs. Every value is merged with defaults and checked,
so a bad entry falls back to its default instead of breaking startup.
"""

import os
import json
import logging
import logging.handlers
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlparse

from .helpers import get_app_data_path
from co2dash import constants


class ObfuscatingFormatter(logging.Formatter):
    """
    A logging formatter that redacts the user's home and data directory paths
    from all log records, including tracebacks.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._path_regexes: List[re.Pattern] = []
        self._setup_paths()

    def _setup_paths(self):
        """Normalizes and pre-compiles regex patterns for the paths to redact."""
        potential_paths = []
        try: potential_paths.append(str(Path.home().resolve()))
        except (OSError, RuntimeError): pass

        try: potential_paths.append(str(Path(get_app_data_path()).resolve()))
        except OSError: pass

        normalized = {
            os.path.normcase(os.path.normpath(p))
            for p in potential_paths
            if p and len(p) > 3  # Ignore trivial paths like "/" or "C:\"
        }
        # Longest first, so a nested path is redacted before its parent
        self._path_regexes = [
            re.compile(re.escape(p), re.IGNORECASE)
            for p in sorted(normalized, key=len, reverse=True)
        ]

    def format(self, record: logging.LogRecord) -> str:
        sanitized_message = super().format(record)
        for pattern in self._path_regexes:
            sanitized_message = pattern.sub(constants.logs.REDACTED_PATH, sanitized_message)
        return sanitized_message


class ConfigError(Exception):
    """Custom exception for configuration-related errors, such as I/O or permission issues."""


class ConfigManager:
    """
    Loads and validates CO2Dash's configuration.
    """
    BASE_DIR = None  # Resolved lazily; see get_base_dir()

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        """
        Initializes the ConfigManager.

        The path is, in order: the argument, $CO2DASH_CONFIG, or the default
        file in the application data directory.
        """
        env_path = os.environ.get(constants.config.defaults.CONFIG_PATH_ENV_VAR)
        if config_path is None and env_path:
            config_path = env_path
        self.config_path = Path(config_path) if config_path else self.get_base_dir() / constants.config.defaults.CONFIG_FILENAME
        self.logger = logging.getLogger("CO2Dash.Config")

    @classmethod
    def get_base_dir(cls) -> Path:
        if cls.BASE_DIR is None:
            cls.BASE_DIR = Path(get_app_data_path())
        return cls.BASE_DIR

    @classmethod
    def get_log_file_path(cls) -> Path:
        """Returns the absolute path to the log file."""
        return cls.get_base_dir() / constants.logs.LOG_FILENAME

    @classmethod
    def setup_logging(cls, log_level: str = 'INFO') -> None:
        """
        Initializes logging with handlers for both a rotating file and the console.
        """
        is_production = os.environ.get(constants.app.ENV_VAR_PROD_MODE, "").lower() == "true"
        console_level = constants.logs.PRODUCTION_LOG_LEVEL if is_production else logging.getLevelName(log_level)
        try:
            logger = logging.getLogger(constants.logs.LOGGER_NAME)
            # The logger passes everything; handlers filter.
            logger.setLevel(logging.DEBUG)
            logger.handlers.clear()

            file_handler = logging.handlers.RotatingFileHandler(
                cls.get_log_file_path(),
                maxBytes=constants.logs.MAX_LOG_SIZE,
                backupCount=constants.logs.LOG_BACKUP_COUNT,
                encoding='utf-8',
                delay=True,
            )
            file_handler.setLevel(constants.logs.PRODUCTION_LOG_LEVEL if is_production else constants.logs.FILE_LOG_LEVEL)
            file_handler.setFormatter(ObfuscatingFormatter(
                constants.logs.LOG_FORMAT,
                datefmt=constants.logs.LOG_DATE_FORMAT
            ))
            logger.addHandler(file_handler)

            console_handler = logging.StreamHandler()
            console_handler.setLevel(console_level)
            console_handler.setFormatter(logging.Formatter(constants.logs.CONSOLE_LOG_FORMAT))
            logger.addHandler(console_handler)

            logger.info("Logging initialized (file: %s).", cls.get_log_file_path())
        except OSError as e:
            logging.basicConfig(level=logging.ERROR)
            logging.error("Failed to initialize file logging, falling back to basic console: %s", e)

    def _validate_numeric(self, key: str, value: Any, default: Any, min_v: float, max_v: float) -> Union[int, float]:
        """Validates a numeric value is within a given range."""
        try:
            if isinstance(value, bool):
                raise TypeError("Booleans are not numbers here")
            num_value = float(value)
            if not (min_v <= num_value <= max_v):
                raise ValueError("Value out of range")
            return int(num_value) if isinstance(default, int) else num_value
        except (TypeError, ValueError):
            self.logger.warning(constants.config.messages.INVALID_NUMERIC.format(key=key, value=value, default=default))
            return default

    def _validate_url(self, key: str, value: Any, default: str) -> str:
        """Validates a value is an absolute http(s) URL."""
        if isinstance(value, str):
            parsed = urlparse(value)
            if parsed.scheme in ("http", "https") and parsed.netloc:
                return value
        self.logger.warning(constants.config.messages.INVALID_URL.format(key=key, value=value, default=default))
        return default

    def _validate_choice(self, key: str, value: Any, default: str, choices: List[str]) -> str:
        """Validates a value is one of the allowed choices (case-insensitive)."""
        if isinstance(value, str):
            for choice in choices:
                if choice.lower() == value.lower():
                    return choice
        self.logger.warning(constants.config.messages.INVALID_CHOICE.format(key=key, value=value, default=default, choices=choices))
        return default

    def _validate_config(self, loaded_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validates the configuration, merges it with defaults for missing keys,
        and sanitizes all values.
        """
        defaults = constants.config.defaults
        default_ref = defaults.DEFAULT_CONFIG
        validated = default_ref.copy()
        validated.update(loaded_config)

        unknown_keys = set(loaded_config.keys()) - set(default_ref.keys())
        if unknown_keys:
            self.logger.warning("Ignoring unknown config fields: %s", ", ".join(sorted(unknown_keys)))

        validated["history_url"] = self._validate_url("history_url", validated.get("history_url"), default_ref["history_url"])
        validated["request_timeout"] = self._validate_numeric("request_timeout", validated.get("request_timeout"), default_ref["request_timeout"], constants.api.MIN_TIMEOUT, constants.api.MAX_TIMEOUT)

        min_w, max_w = defaults.WINDOW_WIDTH_RANGE
        min_h, max_h = defaults.WINDOW_HEIGHT_RANGE
        validated["window_width"] = self._validate_numeric("window_width", validated.get("window_width"), default_ref["window_width"], min_w, max_w)
        validated["window_height"] = self._validate_numeric("window_height", validated.get("window_height"), default_ref["window_height"], min_h, max_h)

        validated["log_level"] = self._validate_choice("log_level", validated.get("log_level"), default_ref["log_level"], list(defaults.LOG_LEVEL_CHOICES))

        return {key: validated[key] for key in default_ref}

    def _apply_environment(self, config: Dict[str, Any]) -> Dict[str, Any]:
        env_var = constants.api.HISTORY_URL_ENV_VAR
        env_url = os.environ.get(env_var)
        if env_url:
            self.logger.info(constants.config.messages.ENV_OVERRIDE.format(key="history_url", env_var=env_var))
            config["history_url"] = self._validate_url("history_url", env_url, config["history_url"])
        return config

    def load(self) -> Dict[str, Any]:
        """
        Loads and validates the configuration.

        A missing file means defaults; a corrupt file is logged and ignored.

        Raises:
            ConfigError: If the file exists but cannot be read.
        """
        if not self.config_path.exists():
            self.logger.info("No configuration file at %s, using defaults.", self.config_path)
            return self._apply_environment(constants.config.defaults.DEFAULT_CONFIG.copy())
        try:
            with self.config_path.open("r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError:
            self.logger.error("Configuration file is corrupt, using defaults.")
            return self._apply_environment(constants.config.defaults.DEFAULT_CONFIG.copy())
        except OSError as e:
            msg = f"OS error reading config file {self.config_path}: {e}"
            self.logger.critical(msg)
            raise ConfigError(msg) from e

        if not isinstance(config, dict):
            self.logger.error("Configuration file must hold a JSON object, using defaults.")
            config = {}

        return self._apply_environment(self._validate_config(config))
