"""
Main module - Main/Composition Root Layer

This module serves as the entry point for the service, orchestrating
the initialization and configuration of all other layers.

Its primary responsibilities include:
- Loading settings (pydantic-settings)
- Building shared clients and services (Composition Root)
- Creating the FastAPI application
- Exposing the command line interface
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]
