from .clock_config import ClockConfig, ClockMode, load_clock_config

__all__ = [
    "ClockConfig",
    "ClockMode",
    "load_clock_config",
]
