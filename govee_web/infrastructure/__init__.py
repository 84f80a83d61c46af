"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as Redis and the
Govee HTTP API.
"""

from govee_web.infrastructure import gateways, repositories, serialization

__all__ = ["gateways", "repositories", "serialization"]
