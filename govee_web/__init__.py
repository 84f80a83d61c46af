"""
Govee Web Root Module

A small web service for listing and controlling Govee light strips,
backed by a Redis cache of the upstream device directory.

Layer Structure:
- Domain: Device entities, errors and abstract ports
- Application: Device controller and DTOs
- Infrastructure: Redis directory cache and Govee API gateway
- Presentation: FastAPI routers and middleware
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, CLI entry point and configuration
"""

__version__ = "0.3.0"
