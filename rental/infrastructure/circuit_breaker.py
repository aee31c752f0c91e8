"""
Circuit breakers for calls to external services.

A breaker opens after ``fail_max`` consecutive failures and fails fast until
``reset_timeout`` seconds have passed, then lets one trial call through
(HALF_OPEN). State changes are logged at WARNING.
"""

import logging

from pybreaker import CircuitBreaker, CircuitBreakerError, CircuitBreakerListener

logger = logging.getLogger(__name__)


def log_circuit_state_change(breaker_name: str, old_state: str, new_state: str) -> None:
    logger.warning(
        "Circuit breaker state changed",
        extra={
            "breaker_name": breaker_name,
            "old_state": old_state,
            "new_state": new_state,
        },
    )


class StateChangeLogger(CircuitBreakerListener):
    """Listener that reports circuit breaker state changes."""

    def state_change(self, cb, old_state, new_state):
        log_circuit_state_change(
            cb.name,
            old_state.name if old_state else "none",
            new_state.name,
        )


def build_breaker(name: str, fail_max: int = 5, reset_timeout: int = 60) -> CircuitBreaker:
    """One breaker per remote service instance."""
    return CircuitBreaker(
        fail_max=fail_max,
        reset_timeout=reset_timeout,
        name=name,
        listeners=[StateChangeLogger()],
    )


__all__ = [
    "build_breaker",
    "CircuitBreakerError",
    "StateChangeLogger",
]
