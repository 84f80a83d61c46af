"""
Presentation Layer Package

This package contains the HTTP-facing components: routers, error
mapping and request logging middleware.
"""

from govee_web.presentation import controllers

__all__ = ["controllers"]
