"""OS interrupt handling for a running check."""

import asyncio
import os
import signal
from typing import Callable, Iterable, List, Optional

import structlog

from resource_quota_check.core.cancellation import CancellationToken

logger = structlog.get_logger(__name__)

GRACE_PERIOD_SECONDS = 30.0
HANDLED_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class InterruptListener:
    """Turns OS interrupts into cancellation of the run.

    The first interrupt cancels the token and starts a grace timer. The
    process is terminated when the timer expires or a second interrupt
    arrives, whichever comes first.
    """

    def __init__(self,
                 token: CancellationToken,
                 grace_period: float = GRACE_PERIOD_SECONDS,
                 exit_func: Callable[[int], None] = os._exit,
                 signals: Iterable[signal.Signals] = HANDLED_SIGNALS,
                 log=None):
        self.token = token
        self.grace_period = grace_period
        self.exit_func = exit_func
        self.signals = tuple(signals)
        self.logger = (log or logger).bind(component="InterruptListener")
        self.received = 0
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._grace_handle: Optional[asyncio.TimerHandle] = None
        self._installed: List[signal.Signals] = []

    def start(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop or asyncio.get_running_loop()
        for sig in self.signals:
            self._loop.add_signal_handler(sig, self.handle_signal, sig)
            self._installed.append(sig)

    def stop(self) -> None:
        if self._grace_handle is not None:
            self._grace_handle.cancel()
            self._grace_handle = None
        if self._loop is not None and not self._loop.is_closed():
            for sig in self._installed:
                self._loop.remove_signal_handler(sig)
        self._installed = []

    def handle_signal(self, sig: signal.Signals) -> None:
        self.received += 1
        if self.received == 1:
            self.logger.info("Received an interrupt signal", signal=signal.Signals(sig).name)
            self.token.cancel(CancellationToken.INTERRUPTED)
            self.logger.info("Shutting down")
            loop = self._loop or asyncio.get_running_loop()
            self._grace_handle = loop.call_later(
                self.grace_period,
                self._terminate,
                "Clean up took too long to complete and timed out",
            )
            return

        self.logger.warning("Received a second interrupt signal", signal=signal.Signals(sig).name)
        self._terminate("Terminating on second interrupt")

    def _terminate(self, reason: str) -> None:
        self.logger.info(reason)
        self.exit_func(0)
