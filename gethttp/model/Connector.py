import logging
import socket
from typing import Callable, Optional

from .errors import ConnectError, ResolutionError, SocketError, os_error_code
from .header import ConnectionTarget

logger = logging.getLogger('gethttp.connector')


class Connector:
    """
    Resolves a connection target to an IPv4 address and opens a TCP stream to it.

    There is no retry and no timeout: a blocking connect waits for whatever the
    OS decides. Failure at any stage raises and leaves no socket open.

    Attributes:
        reporter: StepReporter receiving the step trail
        socket_factory: Callable returning a new IPv4 stream socket
        resolver: Callable mapping a host name to a dotted-quad address
    """

    def __init__(
        self,
        reporter,
        socket_factory: Optional[Callable[[], socket.socket]] = None,
        resolver: Optional[Callable[[str], str]] = None,
    ):
        self.reporter = reporter
        self.socket_factory = socket_factory or (lambda: socket.socket(socket.AF_INET, socket.SOCK_STREAM))
        self.resolver = resolver or socket.gethostbyname

    def resolve(self, host: str) -> str:
        """
        Map host to an IPv4 address.

        A literal dotted-quad is used as is. Anything else goes to DNS and the
        first address returned wins.

        Raises:
            ResolutionError: Empty host or lookup failure
        """
        try:
            return socket.inet_ntoa(socket.inet_aton(host))
        except (OSError, ValueError):
            pass

        self.reporter.detail(f"inet_addr failed; calling gethostbyname for '{host}'...")
        if not host:
            raise ResolutionError("Cannot resolve connectTo", -1)
        try:
            return self.resolver(host)
        except (OSError, ValueError) as e:
            code = os_error_code(e) if isinstance(e, OSError) else -1
            logger.error(f"DNS resolution failed for {host}: {e}")
            raise ResolutionError("Cannot resolve connectTo", code) from e

    def create_socket(self) -> socket.socket:
        try:
            return self.socket_factory()
        except OSError as e:
            logger.error(f"Socket creation failed: {e}")
            raise SocketError("Cannot create socket", os_error_code(e)) from e

    def connect(self, target: ConnectionTarget) -> socket.socket:
        """
        Resolve, create and connect, printing steps 5 to 7.

        Args:
            target: Proxy or origin to dial

        Returns:
            socket.socket: A connected socket owned by the caller

        Raises:
            ResolutionError, SocketError, ConnectError
        """
        self.reporter.step(5, f"Resolving '{target.host}' ...")
        ip = self.resolve(target.host)
        self.reporter.detail(f"Resolved '{target.host}' → {ip}:{target.port}")
        logger.info(f"Resolved {target.host} to {ip}")

        self.reporter.step(6, "Creating socket...")
        sock = self.create_socket()
        self.reporter.detail(f"Socket created (fd={sock.fileno()})")

        self.reporter.step(7, f"Connecting to {target} ...")
        try:
            sock.connect((ip, target.port))
        except OSError as e:
            sock.close()
            logger.error(f"❌ Connect to {target} ({ip}) failed: {e}")
            raise ConnectError("Cannot connect", os_error_code(e)) from e

        self.reporter.detail(f"Connected to {target}")
        logger.info(f"✅ Connected to {target} ({ip})")
        return sock
