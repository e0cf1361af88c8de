"""
Runtime config loader for the process-wide Clock.

Related: tempus.platform.time.clock_factory.build_clock,
  tempus.platform.time.fixed_clock.FixedClock
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

import yaml

from tempus.shared_kernel.primitives import PointInTime

_ENV_NAME_KEY = "TEMPUS_ENV"
_CONFIG_PATH_KEY = "TEMPUS_CLOCK_CONFIG"
_ALLOWED_ENVS = ("dev", "prod", "test")

_MODE_ENV_KEYS = ("TEMPUS_CLOCK_MODE",)
_FIXED_NOW_ENV_KEYS = ("TEMPUS_FIXED_NOW",)


class ClockMode(str, Enum):
    """
    Supported Clock implementations.

    Related: tempus.platform.time.clock_factory.build_clock
    """

    SYSTEM = "system"
    FIXED = "fixed"


_DEFAULT_MODE = ClockMode.SYSTEM


@dataclass(frozen=True, slots=True)
class ClockConfig:
    """
    Immutable runtime config selecting the Clock implementation.

    Related: tempus.platform.time.clock_factory.build_clock
    """

    mode: ClockMode = _DEFAULT_MODE
    fixed_now: PointInTime | None = None

    def __post_init__(self) -> None:
        """
        Validate clock config invariants.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            `fixed_now` is ignored unless mode is `fixed`.
        Raises:
            ValueError: If mode is unknown or `fixed` mode has no `fixed_now`.
        Side Effects:
            Normalizes string mode into `ClockMode`.
        """
        object.__setattr__(self, "mode", _parse_mode(self.mode, key="mode"))
        if self.mode is ClockMode.FIXED and self.fixed_now is None:
            raise ValueError("fixed_now is required when clock mode is 'fixed'")


def load_clock_config(
    *,
    environ: Mapping[str, str],
) -> ClockConfig:
    """
    Load clock config from YAML and env overrides.

    Args:
        environ: Environment mapping used to resolve env and override values.
    Returns:
        ClockConfig: Validated clock settings.
    Assumptions:
        Optional `clock` section lives in clock YAML; env-derived default path
        may be absent, in which case defaults apply.
    Raises:
        FileNotFoundError: If explicit `TEMPUS_CLOCK_CONFIG` path does not exist.
        ValueError: If YAML or environment values are invalid.
        CanNotCreatePointInTimeError: If `fixed_now` is not a valid UTC message timestamp.
    Side Effects:
        Reads at most one YAML file from disk.
    """
    config_path, explicit = _resolve_clock_config_path(environ=environ)
    file_payload = _load_optional_clock_payload(path=config_path, required=explicit)

    mode = _resolve_str_setting(
        environ=environ,
        env_keys=_MODE_ENV_KEYS,
        payload=file_payload,
        payload_key="mode",
    )
    fixed_now = _resolve_str_setting(
        environ=environ,
        env_keys=_FIXED_NOW_ENV_KEYS,
        payload=file_payload,
        payload_key="fixed_now",
    )

    return ClockConfig(
        mode=_parse_mode(mode, key="clock.mode") if mode is not None else _DEFAULT_MODE,
        fixed_now=PointInTime.from_serialized_string(fixed_now) if fixed_now is not None else None,
    )


def _resolve_clock_config_path(*, environ: Mapping[str, str]) -> tuple[Path, bool]:
    """
    Resolve clock YAML path using explicit override or `TEMPUS_ENV`.

    Args:
        environ: Environment mapping.
    Returns:
        tuple[Path, bool]: Clock YAML path and whether it was set explicitly.
    Assumptions:
        `TEMPUS_CLOCK_CONFIG` has priority over env-derived path.
    Raises:
        ValueError: If env value is invalid.
    Side Effects:
        None.
    """
    override = environ.get(_CONFIG_PATH_KEY, "").strip()
    if override:
        return Path(override), True

    env_name = _resolve_env_name(environ=environ)
    return Path("configs") / env_name / "clock.yaml", False


def _resolve_env_name(*, environ: Mapping[str, str]) -> str:
    """
    Resolve normalized runtime environment name.

    Args:
        environ: Environment mapping.
    Returns:
        str: One of `dev`, `prod`, `test`.
    Assumptions:
        Missing env falls back to `dev`.
    Raises:
        ValueError: If value is outside allowed set.
    Side Effects:
        None.
    """
    raw_env = environ.get(_ENV_NAME_KEY, "dev").strip().lower()
    if raw_env not in _ALLOWED_ENVS:
        raise ValueError(
            f"{_ENV_NAME_KEY} must be one of {_ALLOWED_ENVS}, got {raw_env!r}"
        )
    return raw_env


def _load_optional_clock_payload(*, path: Path, required: bool) -> Mapping[str, Any]:
    """
    Load optional `clock` mapping from clock YAML.

    Args:
        path: Clock config path.
        required: Whether a missing file is an error.
    Returns:
        Mapping[str, Any]: Optional `clock` mapping, or empty mapping.
    Assumptions:
        Unknown keys are ignored by this loader.
    Raises:
        FileNotFoundError: If YAML path is required and does not exist.
        ValueError: If YAML structure is invalid.
    Side Effects:
        Reads one UTF-8 file from disk when present.
    """
    if not path.exists():
        if required:
            raise FileNotFoundError(f"clock config not found: {path}")
        return {}
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError("clock config must be a mapping at top-level")

    clock_map = raw.get("clock")
    if clock_map is None:
        return {}
    if not isinstance(clock_map, dict):
        raise ValueError("clock section must be a mapping")
    return clock_map


def _resolve_str_setting(
    *,
    environ: Mapping[str, str],
    env_keys: tuple[str, ...],
    payload: Mapping[str, Any],
    payload_key: str,
) -> str | None:
    """
    Resolve string setting from env -> payload precedence.

    Args:
        environ: Environment mapping.
        env_keys: Candidate env variable names by priority.
        payload: Parsed YAML subsection.
        payload_key: YAML key name.
    Returns:
        str | None: Stripped value, or None when unset everywhere.
    Assumptions:
        Blank env values count as unset.
    Raises:
        ValueError: If YAML value is not a non-empty string.
    Side Effects:
        None.
    """
    for env_key in env_keys:
        raw = environ.get(env_key, "").strip()
        if raw:
            return raw

    payload_value = payload.get(payload_key)
    if payload_value is None:
        return None
    if not isinstance(payload_value, str):
        # unquoted YAML timestamps load as datetime and lose the exact text
        raise ValueError(
            f"expected quoted string for clock.{payload_key}, "
            f"got {type(payload_value).__name__}"
        )
    normalized = payload_value.strip()
    if not normalized:
        raise ValueError(f"clock.{payload_key} must be non-empty")
    return normalized


def _parse_mode(raw: ClockMode | str, *, key: str) -> ClockMode:
    if isinstance(raw, ClockMode):
        return raw
    normalized = str(raw).strip().lower()
    try:
        return ClockMode(normalized)
    except ValueError as error:
        allowed = tuple(mode.value for mode in ClockMode)
        raise ValueError(f"{key} must be one of {allowed}, got {raw!r}") from error


__all__ = [
    "ClockConfig",
    "ClockMode",
    "load_clock_config",
]
