from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from enum import Enum

from ..zones import describe_zone


class TimeError(ValueError):
    """
    Base error for time-related contract violations.

    Related:
      - src/tempus/shared_kernel/primitives/point_in_time.py
      - src/tempus/platform/config/clock_config.py
    """


class PointInTimeErrorKind(str, Enum):
    """
    Failure variants of `CanNotCreatePointInTimeError`.

    Related: .time_errors.CanNotCreatePointInTimeError
    """

    ZONE_INCOMPATIBILITY = "zone_incompatibility"
    PARSE_FAILURE = "parse_failure"


class CanNotCreatePointInTimeError(TimeError):
    """
    Raised when a PointInTime cannot be built from the given value or text.

    Related:
      - src/tempus/shared_kernel/primitives/point_in_time.py
      - src/tempus/shared_kernel/primitives/timestamp_formats.py
    """

    def __init__(
        self,
        message: str,
        *,
        kind: PointInTimeErrorKind,
        input_text: str | None = None,
        expected_zone: str | None = None,
        received_zone: str | None = None,
    ) -> None:
        """
        Build error with failure kind and diagnostic context.

        Args:
            message: Human-readable failure description.
            kind: Failure variant.
            input_text: Offending timestamp text for parse failures.
            expected_zone: Required zone identifier for zone failures.
            received_zone: Actual zone identifier for zone failures.
        Returns:
            None.
        Assumptions:
            Callers use the `from_*` factories instead of direct construction.
        Raises:
            None.
        Side Effects:
            None.
        """
        super().__init__(message)
        self._kind = kind
        self._input_text = input_text
        self._expected_zone = expected_zone
        self._received_zone = received_zone

    @classmethod
    def from_incompatible_zone(
        cls,
        value: datetime,
        expected_zone: tzinfo = timezone.utc,
    ) -> CanNotCreatePointInTimeError:
        """
        Build zone-incompatibility error naming both the expected and received zone.

        Args:
            value: Datetime whose zone was rejected.
            expected_zone: Zone every PointInTime must carry.
        Returns:
            CanNotCreatePointInTimeError: Error of kind `zone_incompatibility`.
        Assumptions:
            None.
        Raises:
            None.
        Side Effects:
            None.
        """
        expected = describe_zone(expected_zone)
        received = describe_zone(value.tzinfo)
        return cls(
            "Attempted to create a PointInTime with an incompatible Zone offset. "
            f"Expected: {expected}, but received: {received}.",
            kind=PointInTimeErrorKind.ZONE_INCOMPATIBILITY,
            expected_zone=expected,
            received_zone=received,
        )

    @classmethod
    def from_invalid_string_format(
        cls,
        input_text: str,
        cause: Exception | None = None,
    ) -> CanNotCreatePointInTimeError:
        """
        Build parse-failure error quoting the offending input verbatim.

        Args:
            input_text: Text that failed to parse.
            cause: Lower-level parse error, chained as `__cause__`.
        Returns:
            CanNotCreatePointInTimeError: Error of kind `parse_failure`.
        Assumptions:
            Raise sites also use `raise ... from cause` so tracebacks show the chain.
        Raises:
            None.
        Side Effects:
            None.
        """
        error = cls(
            "Attempted to create a PointInTime from an invalidly formatted timestamp string. "
            f"Received: {input_text}.",
            kind=PointInTimeErrorKind.PARSE_FAILURE,
            input_text=input_text,
        )
        error.__cause__ = cause
        return error

    @property
    def kind(self) -> PointInTimeErrorKind:
        return self._kind

    @property
    def input_text(self) -> str | None:
        return self._input_text

    @property
    def expected_zone(self) -> str | None:
        return self._expected_zone

    @property
    def received_zone(self) -> str | None:
        return self._received_zone
