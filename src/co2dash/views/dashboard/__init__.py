"""
The dashboard window: layout, worker thread, and off-screen chart renderer.
"""

from .renderer import ChartImage, ChartRenderer
from .window import DashboardWindow

__all__ = ["ChartImage", "ChartRenderer", "DashboardWindow"]
