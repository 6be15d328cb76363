import logging

from .errors import RequestSizeError
from .header import DEFAULT_MAX_REQUEST_SIZE, HTTP_PORT, ParsedUrl, RequestMode

logger = logging.getLogger('gethttp.request')

CRLF = "\r\n"


class RequestBuilder:
    """
    Formats the GET request for either addressing mode.

    A proxy gets the absolute-URL request-target and the bare origin host in
    the Host header. An origin gets the path-only form and "host:80".
    Connection: close is always sent so the response ends with end-of-stream.
    """

    def __init__(self, max_size: int = DEFAULT_MAX_REQUEST_SIZE):
        self.max_size = max_size

    def request_text(self, url: ParsedUrl, mode: RequestMode) -> str:
        if mode is RequestMode.PROXY:
            request_line = f"GET http://{url.host}/{url.path} HTTP/1.1"
            host_header = url.host
        else:
            request_line = f"GET /{url.path} HTTP/1.1"
            host_header = f"{url.host}:{HTTP_PORT}"
        return (
            f"{request_line}{CRLF}"
            f"Host: {host_header}{CRLF}"
            f"Connection: close{CRLF}"
            f"{CRLF}"
        )

    def build(self, url: ParsedUrl, mode: RequestMode) -> bytes:
        """
        Encode the request, refusing anything above max_size bytes.

        Undecodable input bytes, carried as surrogates, go on the wire unchanged.

        Raises:
            RequestSizeError: The encoded request is larger than max_size
        """
        data = self.request_text(url, mode).encode("utf-8", "surrogateescape")
        if len(data) > self.max_size:
            logger.error(f"Request of {len(data)} bytes exceeds limit of {self.max_size}")
            raise RequestSizeError(
                f"Request of {len(data)} bytes exceeds maximum of {self.max_size} bytes", -1
            )
        return data
