"""
Views submodule for CO2Dash.

Contains the UI-related classes; the main one is DashboardWindow.
"""

from .dashboard import DashboardWindow

__all__ = ["DashboardWindow"]
