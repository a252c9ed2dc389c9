"""Toggleable precondition checks.

Checks stand in for debug-build assertions: while enabled, a failed
precondition raises :class:`ContractViolation`; while disabled, callers fall
through to plain IEEE-754 behaviour (NaN and infinities propagate).
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from . import config

logger = logging.getLogger(__name__)

_checks_enabled = config.DEFAULT_CHECK_CONTRACTS


class ContractViolation(AssertionError):
    """A checked precondition did not hold."""


def checks_enabled() -> bool:
    return _checks_enabled


def set_checks(enabled: bool) -> None:
    global _checks_enabled
    enabled = bool(enabled)
    if enabled != _checks_enabled:
        logger.debug("Contract checks %s", "enabled" if enabled else "disabled")
    _checks_enabled = enabled


def enable_checks() -> None:
    set_checks(True)


def disable_checks() -> None:
    set_checks(False)


@contextmanager
def contract_checks(enabled: bool) -> Iterator[None]:
    """Temporarily force checks on or off, restoring the previous state."""
    previous = _checks_enabled
    set_checks(enabled)
    try:
        yield
    finally:
        set_checks(previous)


def require(condition: bool, message: str, *args: object) -> None:
    if not _checks_enabled or condition:
        return
    logger.error("Contract violation: " + message, *args)
    raise ContractViolation(message % args if args else message)


def configure(check_contracts: bool | None = None, log_level: str | None = None) -> None:
    """Set the check toggle and/or the ``render_math`` logger level."""
    if check_contracts is not None:
        set_checks(check_contracts)
    if log_level is not None:
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {log_level!r}")
        logging.getLogger(config.LOGGER_NAME).setLevel(level)
