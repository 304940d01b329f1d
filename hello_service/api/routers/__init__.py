"""API route package for endpoint composition."""

from .greeting import api_create_greeting_route
from .health import api_create_health_route

__all__ = ["api_create_greeting_route", "api_create_health_route"]
