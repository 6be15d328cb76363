# =============================================================================
# Core Types & Configuration
# =============================================================================

from dataclasses import dataclass
from enum import Enum
from typing import Optional

HTTP_PORT = 80
DEFAULT_MAX_REQUEST_SIZE = 4096
DEFAULT_BUFFER_SIZE = DEFAULT_MAX_REQUEST_SIZE - 2
MAX_URL_LENGTH = 1023
HTTP_SCHEME = "http://"
PROXY_ENV_VAR = "http_proxy"


class RequestMode(Enum):
    DIRECT = "direct"
    PROXY = "proxy"


@dataclass(frozen=True)
class ParsedUrl:
    host: str
    path: str = ""


@dataclass(frozen=True)
class ProxyDescriptor:
    host: Optional[str] = None
    port: Optional[int] = None
    enabled: bool = False

    @classmethod
    def disabled(cls) -> "ProxyDescriptor":
        return cls()

    @classmethod
    def enable(cls, host: str, port: int) -> "ProxyDescriptor":
        return cls(host=host, port=port, enabled=True)


@dataclass(frozen=True)
class ConnectionTarget:
    host: str
    port: int

    @classmethod
    def select(cls, url: ParsedUrl, proxy: ProxyDescriptor) -> "ConnectionTarget":
        """Pick the proxy when one is enabled, otherwise the origin on port 80."""
        if proxy.enabled:
            return cls(proxy.host, proxy.port)
        return cls(url.host, HTTP_PORT)

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass
class TransferStats:
    bytes_sent: int = 0
    bytes_received: int = 0
    chunks: int = 0
    elapsed: float = 0.0


@dataclass
class ClientConfig:
    url: Optional[str] = None
    proxy: Optional[str] = None
    max_request_size: int = DEFAULT_MAX_REQUEST_SIZE
    buffer_size: int = DEFAULT_BUFFER_SIZE
    summary: bool = False
    log_file: Optional[str] = None
    verbose: bool = False
