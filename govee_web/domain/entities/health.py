"""
Health domain entities.

Value objects describing the service health reported by ``/health``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HealthStatus(str, Enum):
    """High-level availability of the service."""

    OK = "ok"
    DEGRADED = "degraded"
    ERROR = "error"


@dataclass(slots=True)
class ServiceHealth:
    """Health snapshot for the running service."""

    version: str
    status: HealthStatus
