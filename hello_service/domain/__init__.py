"""Domain package for shared runtime contracts."""

from .client_ip import domain_resolve_client_ip, domain_split_host_port
from .models import HealthStatus

__all__ = ["HealthStatus", "domain_resolve_client_ip", "domain_split_host_port"]
