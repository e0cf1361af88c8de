from __future__ import annotations

import logging

from tempus.application.ports.clock import Clock
from tempus.platform.config.clock_config import ClockConfig, ClockMode

from .fixed_clock import FixedClock
from .system_clock import SystemClock

log = logging.getLogger(__name__)


def build_clock(config: ClockConfig) -> Clock:
    """
    Build the process-wide Clock selected by runtime config.

    Args:
        config: Validated clock config.
    Returns:
        Clock: `SystemClock` or `FixedClock` pinned to `config.fixed_now`.
    Assumptions:
        `ClockConfig` already guarantees `fixed_now` for fixed mode.
    Raises:
        None.
    Side Effects:
        Emits one INFO log record describing the wired clock.
    """
    if config.mode is ClockMode.FIXED and config.fixed_now is not None:
        log.info("clock wired: mode=fixed now=%s", config.fixed_now)
        return FixedClock(config.fixed_now)

    log.info("clock wired: mode=system")
    return SystemClock()
