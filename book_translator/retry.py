"""
Retry policy for flaky network calls.

The default policy waits a fixed 20 seconds between attempts and never
gives up. Growth and caps are available for callers that want them:

    policy = RetryPolicy(delay=1.0, backoff=2.0, max_delay=60.0, max_attempts=5)
    result = policy.call(fetch)
"""

import sys
import time
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from tenacity import (
    RetryCallState,
    Retrying,
    stop_after_attempt,
    stop_never,
    wait_exponential,
    wait_fixed,
)

T = TypeVar("T")


@dataclass
class RetryPolicy:
    """Retries a callable until it returns, sleeping between attempts."""
    delay: float = 20.0  # seconds before the first retry
    backoff: float = 1.0  # multiplier per attempt, 1.0 = fixed delay
    max_delay: Optional[float] = None
    max_attempts: Optional[int] = None  # None = retry forever
    sleep: Callable[[float], None] = time.sleep
    on_retry: Optional[Callable[[int, Exception, float], None]] = None

    def __post_init__(self):
        if self.delay < 0:
            raise ValueError(f"Delay cannot be negative, got {self.delay}")
        if self.backoff < 1:
            raise ValueError(f"Backoff must be at least 1, got {self.backoff}")
        if self.max_delay is not None and self.max_delay < 0:
            raise ValueError(f"Max delay cannot be negative, got {self.max_delay}")
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError(f"Max attempts must be positive, got {self.max_attempts}")

    def _wait(self):
        if self.backoff == 1:
            delay = self.delay if self.max_delay is None else min(self.delay, self.max_delay)
            return wait_fixed(delay)
        if self.max_delay is None:
            return wait_exponential(multiplier=self.delay, exp_base=self.backoff)
        return wait_exponential(multiplier=self.delay, exp_base=self.backoff, max=self.max_delay)

    def _stop(self):
        if self.max_attempts is None:
            return stop_never
        return stop_after_attempt(self.max_attempts)

    def _before_sleep(self, retry_state: RetryCallState) -> None:
        attempt = retry_state.attempt_number
        error = retry_state.outcome.exception()
        delay = retry_state.next_action.sleep
        print(f"[ERROR] Attempt {attempt} failed: {error}", file=sys.stderr)
        print(f"[RETRY] Retrying in {delay:g} seconds...")
        if self.on_retry:
            self.on_retry(attempt - 1, error, delay)

    def call(self, func: Callable[[], T]) -> T:
        """
        Call func until it returns without raising.

        Every failure is reported on stderr and followed by a sleep.
        When max_attempts is set, the last exception is re-raised once
        the attempts are used up.
        """
        retrying = Retrying(
            wait=self._wait(),
            stop=self._stop(),
            sleep=self.sleep,
            before_sleep=self._before_sleep,
            reraise=True,
        )
        return retrying(func)
