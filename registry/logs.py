import logging
import sys
import time
from typing import Optional

logger = logging.getLogger("registry.ops")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "WARNING"):
    """Configure root logging once, on stderr so stdout stays reserved for mode output."""
    lvl = logging.getLevelName(level.upper())
    if not isinstance(lvl, int):
        lvl = logging.WARNING
    logging.basicConfig(level=lvl, format=LOG_FORMAT, stream=sys.stderr)


class LogContext:
    def __init__(self, action: str):
        self.action = action
        self.start = time.perf_counter()
        self.payload = None

    def set_payload(self, obj): self.payload = obj

    def elapsed(self) -> float:
        return time.perf_counter() - self.start

    def write(self, result: str = "OK", err: Optional[str] = None):
        elapsed_ms = int(self.elapsed() * 1000)
        # failures are printed to stderr by the caller, keep this at INFO
        logger.info(
            "action=%s result=%s latency_ms=%d payload=%s err=%s",
            self.action, result, elapsed_ms, self.payload, err,
        )
