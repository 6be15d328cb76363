import io

import pytest

from gethttp.model.errors import InputError
from gethttp.model.UrlParser import parse_url, read_url


@pytest.mark.parametrize("raw, host, path", [
    ("http://example.com/index.html", "example.com", "index.html"),
    ("example.com/a/b/c.txt", "example.com", "a/b/c.txt"),
    ("http://example.com", "example.com", ""),
    ("http://example.com/", "example.com", ""),
    ("10.0.0.5/status", "10.0.0.5", "status"),
    ("http://host:8080/x", "host:8080", "x"),
])
def test_parse_url_splits_host_and_path(raw, host, path):
    url = parse_url(raw)
    assert url.host == host
    assert url.path == path


def test_parse_url_scheme_is_stripped_once():
    assert parse_url("http://http://x/y").host == "http:"


def test_parse_url_keeps_other_schemes_in_host():
    url = parse_url("https://example.com/")
    assert url.host == "https:"
    assert url.path == "/example.com/"


def test_read_url_returns_first_token():
    assert read_url(io.StringIO("  http://a/b  extra\n")) == "http://a/b"


def test_read_url_skips_blank_lines():
    assert read_url(io.StringIO("\n   \n\texample.com\n")) == "example.com"


@pytest.mark.parametrize("data", ["", "   ", "\n\n \t\n"])
def test_read_url_without_token_is_input_error(data):
    with pytest.raises(InputError) as info:
        read_url(io.StringIO(data))
    assert info.value.code == -1


def test_read_url_rejects_overlong_token():
    with pytest.raises(InputError):
        read_url(io.StringIO("a" * 1024 + "\n"))
    assert read_url(io.StringIO("a" * 1023)) == "a" * 1023


def test_read_url_maps_decode_failure_to_input_error():
    stream = io.TextIOWrapper(io.BytesIO(b"caf\xe9\n"), encoding="utf-8")
    with pytest.raises(InputError):
        read_url(stream)


def test_read_url_keeps_escaped_bytes():
    stream = io.TextIOWrapper(io.BytesIO(b"caf\xe9\n"), encoding="utf-8", errors="surrogateescape")
    assert read_url(stream) == "caf\udce9"
