"""
Core module initialization.
Exports configuration and logging utilities.
"""

from app.core.config import get_settings, setup_logging, Settings

__all__ = ["get_settings", "setup_logging", "Settings"]
