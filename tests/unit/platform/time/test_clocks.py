from __future__ import annotations

import logging
from datetime import datetime, timezone

import pytest

from tempus.application.ports import Clock
from tempus.platform.config import ClockConfig, ClockMode
from tempus.platform.time import FixedClock, SystemClock, build_clock
from tempus.shared_kernel.errors import CanNotCreatePointInTimeError
from tempus.shared_kernel.primitives import PointInTime, TimeUnit


class _Deadline:
    """Clock consumer used to check that Clock implementations are interchangeable."""

    def __init__(self, clock: Clock, *, at: PointInTime) -> None:
        self._clock = clock
        self._at = at

    def expired(self) -> bool:
        return not self._clock.now().is_before(self._at)


def test_system_clock_returns_current_utc_point() -> None:
    before = datetime.now(timezone.utc)
    now = SystemClock().now()
    after = datetime.now(timezone.utc)

    assert before <= now.to_datetime() <= after
    assert now.to_datetime().tzinfo is timezone.utc


def test_fixed_clock_returns_identical_value_on_every_call() -> None:
    clock = FixedClock.from_serialized_string("2024-03-07 10:28:55.437286+0000")

    values = [clock.now() for _ in range(5)]

    assert all(value == values[0] for value in values)
    assert values[0].to_serialized_string() == "2024-03-07 10:28:55.437286+0000"
    assert repr(clock) == "FixedClock('2024-03-07 10:28:55.437286+0000')"


def test_fixed_clock_rejects_invalid_construction() -> None:
    with pytest.raises(CanNotCreatePointInTimeError):
        FixedClock.from_serialized_string("2024-03-07 10:28:55.437286+0100")
    with pytest.raises(TypeError):
        FixedClock("2024-03-07 10:28:55.437286+0000")  # type: ignore[arg-type]


def test_clock_consumers_accept_fixed_and_system_clocks() -> None:
    fixed = FixedClock.from_serialized_string("2024-03-07 10:28:55.437286+0000")
    deadline = fixed.now().plus(1, TimeUnit.MINUTES)

    assert not _Deadline(fixed, at=deadline).expired()
    assert _Deadline(FixedClock(deadline), at=deadline).expired()
    assert not _Deadline(SystemClock(), at=PointInTime.from_mysql_string("9999-01-01 00:00:00.000000")).expired()  # noqa: E501


def test_build_clock_wires_fixed_clock_and_logs(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="tempus.platform.time.clock_factory")
    fixed_now = PointInTime.from_serialized_string("2024-03-07 10:28:55.437286+0000")

    clock = build_clock(ClockConfig(mode=ClockMode.FIXED, fixed_now=fixed_now))

    assert isinstance(clock, FixedClock)
    assert clock.now() == fixed_now
    assert "clock wired: mode=fixed now=2024-03-07 10:28:55.437286+0000" in caplog.text


def test_build_clock_defaults_to_system_clock() -> None:
    assert isinstance(build_clock(ClockConfig()), SystemClock)
