"""
Domain Layer Package

This package contains the core business rules of the service. It defines
entities, errors and the gateway and repository contracts without
dependencies on external frameworks or infrastructure concerns.
"""

# Re-export submodules
from govee_web.domain import entities, gateways, repositories

__all__ = ["entities", "gateways", "repositories"]
