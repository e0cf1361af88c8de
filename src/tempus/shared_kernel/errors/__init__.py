from .time_errors import CanNotCreatePointInTimeError, PointInTimeErrorKind, TimeError

__all__ = [
    "CanNotCreatePointInTimeError",
    "PointInTimeErrorKind",
    "TimeError",
]
