"""
Fatal error taxonomy. Every error carries a human-readable message and the
underlying numeric code (an OS errno where one exists).
"""

FAILURE_STATUS = 1


class GetHttpError(Exception):
    """Base class for every fatal condition of a run."""

    def __init__(self, message: str, code: int = -1):
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else -1

    @property
    def exit_status(self) -> int:
        """The OS code when it is positive, otherwise the fixed failure status."""
        return self.code if self.code > 0 else FAILURE_STATUS

    def __str__(self) -> str:
        return f"{self.message} (code {self.code})"


class InputError(GetHttpError):
    pass


class ResolutionError(GetHttpError):
    pass


class SocketError(GetHttpError):
    pass


class ConnectError(GetHttpError):
    pass


class RequestSizeError(GetHttpError):
    pass


class SendError(GetHttpError):
    pass


class RecvError(GetHttpError):
    pass


def os_error_code(exc: OSError) -> int:
    """Extract the errno of an OSError, -1 when the OS gave none."""
    return exc.errno if exc.errno is not None else -1
