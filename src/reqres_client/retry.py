import logging
from collections.abc import Callable
from typing import Any

import httpx
from tenacity import RetryCallState, retry, retry_if_exception, stop_after_attempt, wait_exponential

logger = logging.getLogger(__name__)

_TRANSIENT_STATUSES = frozenset({408, 429})


def is_transient(exc: BaseException) -> bool:
    """True for network faults, timeouts, 408, 429 and 5xx responses."""
    if isinstance(exc, httpx.TransportError):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        return status in _TRANSIENT_STATUSES or status >= 500
    return False


def default_http_retry(
    label: str,
    *,
    max_attempts: int = 3,
    backoff_base: float = 2.0,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Return a tenacity retry decorator configured for HTTP calls.

    The wait before retry *n* is ``backoff_base ** n`` seconds. *label* is
    interpolated into the warning emitted before each retry, e.g.
    ``"Retrying <label> (attempt 2): <error>"``.
    """

    def _log_retry(retry_state: RetryCallState) -> None:
        sleep = retry_state.next_action.sleep if retry_state.next_action else 0.0
        logger.warning(
            "Retrying %s (attempt %d, waiting %.1fs): %s",
            label,
            retry_state.attempt_number,
            sleep,
            retry_state.outcome.exception() if retry_state.outcome else None,
        )

    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=backoff_base, exp_base=backoff_base),
        retry=retry_if_exception(is_transient),
        before_sleep=_log_retry,
        reraise=True,
    )
