import logging
import sys

logger = logging.getLogger('gethttp.subsystem')


class SocketSubsystem:
    """
    Explicit setup/teardown pair for the platform socket layer.

    CPython brings WinSock up when the socket module is imported, so neither
    half calls into the OS. Teardown runs at most once.
    """

    def __init__(self, reporter, platform: str = sys.platform):
        self.reporter = reporter
        self.platform = platform
        self.active = False

    @property
    def is_windows(self) -> bool:
        return self.platform.startswith("win")

    def startup(self):
        if self.active:
            raise RuntimeError("socket subsystem already started")
        if self.is_windows:
            self.reporter.step(1, "Initializing WinSock (WSAStartup)...")
        else:
            self.reporter.step(1, "(Unix) No WSAStartup needed.")
        self.active = True
        logger.debug(f"Socket subsystem started on {self.platform}")

    def cleanup(self):
        if not self.active:
            return
        self.active = False
        logger.debug("Socket subsystem torn down")

    def __enter__(self):
        self.startup()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.cleanup()
        return False
