"""Best-effort client address resolution from proxy headers and peer address.

Resolution never validates address syntax and never raises: the worst case is
an empty or unparsed string returned to the caller for logging.
"""

from collections.abc import Mapping

FORWARDED_FOR_HEADER = "x-forwarded-for"
REAL_IP_HEADER = "x-real-ip"


def domain_split_host_port(address: str) -> tuple[str, str]:
    """Split `host:port` text into its host and port parts.

    Bracketed IPv6 literals (`[2001:db8::1]:443`) are unwrapped. Bare IPv6
    addresses and addresses without a port are rejected.

    Args:
        address: Transport address text.

    Returns:
        tuple[str, str]: Host and port parts.

    Raises:
        ValueError: Raised when address is not in `host:port` form.
    """

    if address.startswith("["):
        closing_index = address.find("]")
        if closing_index == -1:
            raise ValueError(f"missing ']' in address: {address!r}")
        if closing_index + 1 == len(address):
            raise ValueError(f"missing port in address: {address!r}")
        if address[closing_index + 1] != ":":
            raise ValueError(f"unexpected text after ']' in address: {address!r}")
        host = address[1:closing_index]
        port = address[closing_index + 2 :]
        if "[" in host:
            raise ValueError(f"unexpected '[' in address: {address!r}")
    else:
        host, separator, port = address.rpartition(":")
        if not separator:
            raise ValueError(f"missing port in address: {address!r}")
        if ":" in host:
            raise ValueError(f"too many colons in address: {address!r}")
        if "[" in host or "]" in host:
            raise ValueError(f"unexpected bracket in address: {address!r}")

    if "[" in port or "]" in port:
        raise ValueError(f"unexpected bracket in port: {address!r}")
    return host, port


def domain_resolve_client_ip(headers: Mapping[str, str], remote_address: str) -> str:
    """Return the best guess of the originating client address.

    Precedence: first `X-Forwarded-For` entry, then `X-Real-IP`, then the host
    part of the transport address (or the raw address when it has no port).

    Args:
        headers: Request headers. Lookups use lowercase names, so a
            case-insensitive mapping such as Starlette `Headers` is expected.
        remote_address: Transport peer address as `host:port` text.

    Returns:
        str: Client address text, possibly empty.
    """

    forwarded_for = headers.get(FORWARDED_FOR_HEADER, "")
    if forwarded_for:
        first_hop, _, _ = forwarded_for.partition(",")
        return first_hop.strip()

    real_ip = headers.get(REAL_IP_HEADER, "")
    if real_ip:
        return real_ip.strip()

    try:
        host, _ = domain_split_host_port(remote_address)
    except ValueError:
        return remote_address
    return host
