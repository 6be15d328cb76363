import logging
import re
from typing import Mapping, Optional

from .header import HTTP_SCHEME, PROXY_ENV_VAR, ProxyDescriptor

logger = logging.getLogger('gethttp.proxy')

MAX_PORT = 65535
_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


def _atoi(text: str) -> int:
    """Parse the leading integer of text the way C's atoi does, 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def resolve_proxy(value: Optional[str]) -> ProxyDescriptor:
    """
    Turn an http_proxy value into a proxy descriptor.

    Only "http://<host>:<port>" with a non-empty host and a port in 1..65535 enables
    the proxy. Anything else disables it; a bad value is never an error.

    Args:
        value: Raw variable value, or None when the variable is unset

    Returns:
        ProxyDescriptor: enabled with host and port, or disabled
    """
    if not value or not value.startswith(HTTP_SCHEME):
        return ProxyDescriptor.disabled()

    rest = value[len(HTTP_SCHEME):]
    host, colon, port_text = rest.partition(":")
    if not colon:
        logger.debug(f"Ignoring proxy value without a port: {value!r}")
        return ProxyDescriptor.disabled()

    port = _atoi(port_text)
    if not host or port <= 0 or port > MAX_PORT:
        logger.debug(f"Ignoring malformed proxy value: {value!r}")
        return ProxyDescriptor.disabled()

    return ProxyDescriptor.enable(host, port)


def proxy_from_environ(environ: Mapping[str, str]) -> ProxyDescriptor:
    return resolve_proxy(environ.get(PROXY_ENV_VAR))
