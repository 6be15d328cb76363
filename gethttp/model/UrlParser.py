from typing import TextIO

from .errors import InputError
from .header import HTTP_SCHEME, MAX_URL_LENGTH, ParsedUrl


def parse_url(raw: str) -> ParsedUrl:
    """
    Split a URL into host and path.

    An optional leading "http://" is dropped, then the text is cut at the first
    "/". The host is not validated here; name resolution does that later.

    Args:
        raw: URL as typed by the user, e.g. "http://example.com/index.html"

    Returns:
        ParsedUrl: host "example.com" and path "index.html"
    """
    rest = raw[len(HTTP_SCHEME):] if raw.startswith(HTTP_SCHEME) else raw
    host, _, path = rest.partition("/")
    return ParsedUrl(host=host, path=path)


def read_url(stream: TextIO, max_length: int = MAX_URL_LENGTH) -> str:
    """
    Read the first whitespace-delimited token from a text stream.

    Blank lines are skipped. Reaching end of input without a token, a token
    longer than max_length, or input the stream cannot decode raises InputError.
    """
    lines = iter(stream)
    while True:
        try:
            line = next(lines)
        except StopIteration:
            break
        except UnicodeDecodeError as e:
            raise InputError(f"URL is not valid {e.encoding} text", -1) from e
        tokens = line.split()
        if not tokens:
            continue
        token = tokens[0]
        if len(token) > max_length:
            raise InputError(f"URL longer than {max_length} characters", -1)
        return token
    raise InputError("Failed to read URL", -1)
