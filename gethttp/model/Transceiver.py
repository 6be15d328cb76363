import logging
import socket
import time

from .errors import RecvError, SendError, os_error_code
from .header import DEFAULT_BUFFER_SIZE, TransferStats

logger = logging.getLogger('gethttp.transceiver')

START_MARKER = "---- Start of response ----"
END_MARKER = "---- End of response ----"


class Transceiver:
    """
    Writes the request and copies the response to the reporter's raw stream.

    The response is not parsed. Reading stops at the first zero-byte read,
    which is the server closing its side after Connection: close.

    Attributes:
        reporter: StepReporter receiving markers and response bytes
        buffer_size (int): Maximum bytes requested per recv call
    """

    def __init__(self, reporter, buffer_size: int = DEFAULT_BUFFER_SIZE):
        self.reporter = reporter
        self.buffer_size = buffer_size

    def send(self, sock: socket.socket, data: bytes) -> int:
        """
        Send the whole request in a single call.

        Raises:
            SendError: The OS refused the write or accepted only part of it
        """
        try:
            sent = sock.send(data)
        except OSError as e:
            logger.error(f"Send failed: {e}")
            raise SendError("Cannot send data", os_error_code(e)) from e

        if sent < len(data):
            logger.error(f"Short send: {sent} of {len(data)} bytes")
            raise SendError("Cannot send data", -1)

        self.reporter.detail("Request sent successfully.")
        logger.info(f"Sent {sent} bytes")
        return sent

    def receive(self, sock: socket.socket, stats: TransferStats) -> TransferStats:
        """
        Print every chunk until end-of-stream, framed by the response markers.

        Raises:
            RecvError: The read failed mid-stream; the end marker is not printed
        """
        self.reporter.step(9, "Receiving HTTP response...")
        self.reporter.line(START_MARKER)
        while True:
            try:
                chunk = sock.recv(self.buffer_size)
            except OSError as e:
                logger.error(f"Receive failed after {stats.bytes_received} bytes: {e}")
                raise RecvError("Error receiving data", os_error_code(e)) from e
            if not chunk:
                break
            self.reporter.raw(chunk)
            stats.bytes_received += len(chunk)
            stats.chunks += 1
            logger.debug(f"Received chunk of {len(chunk)} bytes")

        self.reporter.line()
        self.reporter.line(END_MARKER)
        logger.info(f"Received {stats.bytes_received} bytes in {stats.chunks} chunks")
        return stats

    def exchange(self, sock: socket.socket, data: bytes) -> TransferStats:
        stats = TransferStats()
        started = time.perf_counter()
        stats.bytes_sent = self.send(sock, data)
        self.receive(sock, stats)
        stats.elapsed = time.perf_counter() - started
        return stats
