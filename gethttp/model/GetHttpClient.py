"""
Single-shot HTTP GET client with a step-by-step diagnostic trail.
"""

import logging
import os
import sys
from typing import Mapping, Optional, TextIO

from rich.console import Console

from ..console import StepReporter, build_summary
from .Connector import Connector
from .errors import GetHttpError, InputError
from .header import ClientConfig, ConnectionTarget, MAX_URL_LENGTH, RequestMode, TransferStats
from .ProxyResolver import proxy_from_environ, resolve_proxy
from .RequestBuilder import RequestBuilder
from .SocketSubsystem import SocketSubsystem
from .Transceiver import Transceiver
from .UrlParser import parse_url, read_url

logger = logging.getLogger('gethttp')

INTERRUPTED_STATUS = 130


def lenient_stdin() -> TextIO:
    """Standard input that keeps undecodable bytes as surrogates instead of failing."""
    if hasattr(sys.stdin, "reconfigure"):
        sys.stdin.reconfigure(errors="surrogateescape")
    return sys.stdin


class GetHttpClient:
    """
    Runs one GET request from prompt to end-of-stream.

    Every fatal error is raised where it happens, unwinds through the socket
    and subsystem blocks (closing both), and is reported once in run().

    Attributes:
        config (ClientConfig): Command line settings
        reporter (StepReporter): Destination of the step trail and response
        stdin (TextIO): Where the URL is read from when none was given
        environ (Mapping): Environment consulted for http_proxy
        connector (Connector): Resolves and dials the connection target
        summary_console (Console): Where --summary output goes
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        reporter: Optional[StepReporter] = None,
        stdin: Optional[TextIO] = None,
        environ: Optional[Mapping[str, str]] = None,
        connector: Optional[Connector] = None,
        summary_console: Optional[Console] = None,
    ):
        self.config = config or ClientConfig()
        self.reporter = reporter or StepReporter()
        self.stdin = stdin if stdin is not None else lenient_stdin()
        self.environ = environ if environ is not None else os.environ
        self.connector = connector or Connector(self.reporter)
        self.builder = RequestBuilder(self.config.max_request_size)
        self.transceiver = Transceiver(self.reporter, self.config.buffer_size)
        self.summary_console = summary_console or Console(stderr=True)

    def run(self) -> int:
        """
        Execute the request and return the process exit status.

        Returns:
            int: 0 on success, otherwise the failing error's exit status
        """
        try:
            with SocketSubsystem(self.reporter):
                self.fetch()
        except GetHttpError as e:
            logger.error(f"{type(e).__name__}: {e}")
            self.reporter.error(e.message, e.code)
            return e.exit_status
        except KeyboardInterrupt:
            logger.warning("Interrupted by user")
            self.reporter.error("Interrupted", INTERRUPTED_STATUS)
            return INTERRUPTED_STATUS

        self.reporter.step(10, "Done. Exiting.")
        return 0

    def acquire_url(self) -> str:
        if self.config.url is not None:
            self.reporter.step(3, "Using URL from command line...")
            url = self.config.url.strip()
            if not url:
                raise InputError("Failed to read URL", -1)
            if len(url) > MAX_URL_LENGTH:
                raise InputError(f"URL longer than {MAX_URL_LENGTH} characters", -1)
            return url

        self.reporter.step(3, "Asking for URL...")
        self.reporter.prompt("URL: ")
        return read_url(self.stdin)

    def fetch(self) -> TransferStats:
        """Steps 2 to 10 of a run; raises GetHttpError on the first failure."""
        self.reporter.step(2, "Preparing address structure...")

        raw_url = self.acquire_url()
        logger.info(f"Requested URL: {raw_url}")

        self.reporter.step(4, "Parsing URL...")
        url = parse_url(raw_url)
        self.reporter.detail(f"Parsed Host: {url.host}")
        self.reporter.detail(f"Parsed Site: {url.path}")

        if self.config.proxy is not None:
            proxy = resolve_proxy(self.config.proxy)
        else:
            proxy = proxy_from_environ(self.environ)
        if proxy.enabled:
            self.reporter.debug(f"http_proxy detected → {proxy.host}:{proxy.port}")
            mode = RequestMode.PROXY
        else:
            self.reporter.debug("No valid http_proxy found → connecting directly")
            mode = RequestMode.DIRECT
        logger.info(f"Request mode: {mode.value}")

        target = ConnectionTarget.select(url, proxy)
        # Built before dialling so an oversized request never touches the network.
        request = self.builder.build(url, mode)

        sock = self.connector.connect(target)
        with sock:
            self.reporter.step(8, "Preparing HTTP GET request...")
            self.reporter.detail(">>> Request >>>")
            self.reporter.raw(request)
            self.reporter.line()
            stats = self.transceiver.exchange(sock, request)
            self.reporter.step(10, "Closing socket and cleaning up.")

        if self.config.summary:
            self.summary_console.print(build_summary(str(target), raw_url, mode.value, stats))
        return stats
