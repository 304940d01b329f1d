"""Typed domain models shared across runtime layers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by the health-check surface.

    Attributes:
        status: Overall status text for service health.
    """

    status: str
