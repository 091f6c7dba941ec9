"""Fixed-interval driver for MirrorEngine.

The engine only knows how to run a single pass; PeriodicSync decides when.
A pass always runs to completion before the wait for the next one starts.
"""

import logging
import threading
from typing import Optional

from folder_mirror.sync.engine import MirrorEngine

logger = logging.getLogger(__name__)


class PeriodicSync:
    """Run MirrorEngine.run_pass() every interval_seconds.

    A pass that fails with an OSError (unreadable tree, log write failure)
    is logged and retried from scratch on the next tick, with no backoff.

    Usage:
        runner = PeriodicSync(engine, interval_seconds=5.0)
        runner.run()           # until runner.stop() from another thread
        runner.run(max_cycles=1)
    """

    def __init__(
        self,
        engine: MirrorEngine,
        interval_seconds: float = 5.0,
        stop_event: Optional[threading.Event] = None
    ):
        self.engine = engine
        self.interval_seconds = float(interval_seconds)
        self.stop_event = stop_event or threading.Event()
        self.cycles = 0
        self.failed_cycles = 0

    def stop(self) -> None:
        """Ask the loop to exit after the current pass."""
        self.stop_event.set()

    def run_once(self) -> bool:
        """Run a single pass, logging instead of raising on I/O failure.

        Returns:
            True if the pass ran to completion
        """
        self.cycles += 1
        try:
            self.engine.run_pass()
        except OSError as e:
            self.failed_cycles += 1
            logger.error(f"Sync pass {self.cycles} aborted: {e}")
            return False
        return True

    def run(self, max_cycles: Optional[int] = None) -> int:
        """Run passes until stopped or max_cycles passes have run.

        Args:
            max_cycles: Optional limit on the number of passes

        Returns:
            Number of passes run by this call
        """
        started = self.cycles
        while not self.stop_event.is_set():
            self.run_once()
            if max_cycles is not None and self.cycles - started >= max_cycles:
                break
            self.stop_event.wait(self.interval_seconds)
        return self.cycles - started
