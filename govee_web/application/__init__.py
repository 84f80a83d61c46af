"""
Application Layer Package

This package contains the application-specific rules: resolving device
identifiers, forwarding commands and reporting health, plus the DTOs
exchanged with the presentation layer.
"""

# Re-export submodules
from govee_web.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
