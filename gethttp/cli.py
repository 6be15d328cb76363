import argparse
import sys

from . import __version__
from .log import setup_logging
from .model.GetHttpClient import GetHttpClient
from .model.header import ClientConfig, DEFAULT_BUFFER_SIZE, DEFAULT_MAX_REQUEST_SIZE


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gethttp",
        description="Send one HTTP/1.1 GET request and print the raw response step by step",
    )
    parser.add_argument("url", nargs="?", default=None, help="URL to fetch (prompted for when omitted)")
    parser.add_argument("--proxy", default=None, help="Proxy as http://host:port, instead of $http_proxy")
    parser.add_argument("--max-request-size", type=positive_int, default=DEFAULT_MAX_REQUEST_SIZE,
                        help="Largest request in bytes")
    parser.add_argument("--buffer-size", type=positive_int, default=DEFAULT_BUFFER_SIZE,
                        help="Bytes requested per receive call")
    parser.add_argument("-s", "--summary", action="store_true", help="Print a transfer summary to stderr")
    parser.add_argument("--log-file", default=None, help="Append log records to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> ClientConfig:
    return ClientConfig(
        url=args.url,
        proxy=args.proxy,
        max_request_size=args.max_request_size,
        buffer_size=args.buffer_size,
        summary=args.summary,
        log_file=args.log_file,
        verbose=args.verbose,
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    setup_logging(config.log_file, config.verbose)
    return GetHttpClient(config).run()


if __name__ == '__main__':
    sys.exit(main())
