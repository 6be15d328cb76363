import sys
from typing import BinaryIO, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from .model.header import TransferStats

DETAIL_INDENT = " " * 8


def printable(text: str) -> str:
    """Replace undecodable bytes (surrogates) so any stdout encoding can take the text."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def format_bytes(num):
    for unit in ['bytes', 'KB', 'MB', 'GB', 'TB']:
        if num < 1024.0:
            return f"{num:.2f} {unit}"
        num /= 1024.0
    return f"{num:.2f} PB"


class StepReporter:
    """
    Writes the diagnostic trail of a run.

    Text lines go through a rich Console with markup and highlighting turned off,
    so "[Step 1]" is printed literally. Response bytes skip rich entirely and are
    written to the binary stream untouched.

    Attributes:
        console (Console): Console for diagnostic text
        raw_out (BinaryIO): Binary stream receiving the response bytes
    """

    def __init__(self, console: Optional[Console] = None, raw_out: Optional[BinaryIO] = None):
        self.console = console or Console(
            file=sys.stdout, markup=False, highlight=False, soft_wrap=True, emoji=False
        )
        self.raw_out = raw_out if raw_out is not None else sys.stdout.buffer

    def _print(self, text: str, end: str = "\n"):
        self.console.print(printable(text), end=end, markup=False, highlight=False, soft_wrap=True, emoji=False)

    def line(self, text: str = ""):
        self._print(text)

    def step(self, number: int, text: str):
        self._print(f"[Step {number}] {text}")

    def detail(self, text: str):
        self._print(f"{DETAIL_INDENT}{text}")

    def debug(self, text: str):
        self._print(f"[DEBUG] {text}")

    def prompt(self, text: str):
        self._print(text, end="")

    def error(self, message: str, code: int):
        self._print(f"ERROR: {message} (code {code})")

    def raw(self, data: bytes):
        # Flush pending text first so markers and response bytes stay in order.
        self.console.file.flush()
        self.raw_out.write(data)
        self.raw_out.flush()


# ========== Transfer Summary ==========

def build_summary(target: str, url: str, mode: str, stats: TransferStats) -> Table:
    """
    Build the transfer summary table shown with --summary.

    Args:
        target: The host:port that was dialled
        url: The requested URL as typed
        mode: "proxy" or "direct"
        stats: Counters collected by the transceiver

    Returns:
        Table: A rich table ready to print
    """
    table = Table(title="📊 Transfer Summary", box=box.SIMPLE, expand=False)
    table.add_column("Field", style="bold cyan", justify="left")
    table.add_column("Value", style="white", justify="left")
    table.add_row("URL", url)
    table.add_row("Mode", mode)
    table.add_row("Connected to", target)
    table.add_row("↑ Sent", format_bytes(stats.bytes_sent))
    table.add_row("↓ Received", format_bytes(stats.bytes_received))
    table.add_row("Chunks", str(stats.chunks))
    table.add_row("Elapsed", f"{stats.elapsed * 1000:.2f} ms")
    return table
