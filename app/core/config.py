"""
Application Configuration Module

Centralizes all configuration using environment variables with Pydantic Settings.
The menu and the table layout are fixed at startup, so everything that shapes
them (table count, cooking time range, menu seed) lives here and is read once
when the order store is built.

Usage:
    from app.core.config import get_settings

    settings = get_settings()
    print(settings.table_count)

Author: Khalil_Bannouri
Version: 1.0.0
"""

import logging
import sys
from typing import Optional
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


MAX_TABLES = 100


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.

    Attributes:
        debug: Enable verbose logging and error details

        # API Configuration
        api_host: Host to bind the API server
        api_port: Port for the API server

        # Restaurant Layout
        table_count: Number of tables registered at startup (1-100)
        cooking_time_min: Lower bound of generated cooking times (minutes)
        cooking_time_max: Upper bound of generated cooking times (minutes)
        menu_seed: Seed for cooking time generation (random when unset)

        # Simulation
        simulation_tables: Default number of tables used by the simulation
        simulation_items_per_table: Items ordered per simulated table
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # APPLICATION
    # ==========================================================================

    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging"
    )
    app_name: str = Field(
        default="Restaurant Table Orders",
        description="Application display name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )
    api_host: str = Field(
        default="127.0.0.1",
        description="API server host"
    )
    api_port: int = Field(
        default=8081,
        ge=1,
        le=65535,
        description="API server port"
    )

    # ==========================================================================
    # RESTAURANT LAYOUT
    # ==========================================================================

    table_count: int = Field(
        default=MAX_TABLES,
        ge=1,
        le=MAX_TABLES,
        description="Number of tables available for orders"
    )
    cooking_time_min: int = Field(
        default=5,
        ge=1,
        description="Minimum cooking time in minutes"
    )
    cooking_time_max: int = Field(
        default=15,
        ge=1,
        description="Maximum cooking time in minutes"
    )
    menu_seed: Optional[int] = Field(
        default=None,
        description="Seed used to generate cooking times"
    )

    # ==========================================================================
    # SIMULATION / CLIENT
    # ==========================================================================

    simulation_tables: int = Field(
        default=10,
        ge=1,
        le=MAX_TABLES,
        description="Default number of tables for the simulation"
    )
    simulation_items_per_table: int = Field(
        default=3,
        ge=1,
        description="Menu items ordered per simulated table"
    )
    server_start_retries: int = Field(
        default=10,
        ge=1,
        description="Seconds the console client waits for the server"
    )

    # ==========================================================================
    # VALIDATORS
    # ==========================================================================

    @model_validator(mode="after")
    def validate_cooking_range(self) -> "Settings":
        """Reject an empty cooking time range."""
        if self.cooking_time_min > self.cooking_time_max:
            raise ValueError(
                f"cooking_time_min ({self.cooking_time_min}) must not exceed "
                f"cooking_time_max ({self.cooking_time_max})"
            )
        return self

    # ==========================================================================
    # COMPUTED PROPERTIES
    # ==========================================================================

    @property
    def base_url(self) -> str:
        """Base URL of the API server."""
        return f"http://{self.api_host}:{self.api_port}"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses LRU cache to ensure settings are loaded only once,
    so the menu and table layout stay consistent for the
    whole application lifecycle.

    Returns:
        Settings: Configured application settings

    Example:
        >>> settings = get_settings()
        >>> print(settings.api_port)
        8081
    """
    return Settings()


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure application-wide logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured root logger
    """
    settings = get_settings()

    # Set level based on debug mode
    if settings.debug:
        level = logging.DEBUG

    log_format = "%(asctime)s │ %(levelname)-8s │ %(name)-25s │ %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt=date_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return logging.getLogger("app")
