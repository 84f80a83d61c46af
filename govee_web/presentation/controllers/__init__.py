"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers are responsible for
input validation, error mapping, and conversion between API DTOs
and application layer results.
"""

from .devices_controller import router as devices_router
from .system_controller import router as system_router

__all__ = ["devices_router", "system_router"]
