"""Parameter decoding, melody configuration, scheduling and logging for a KNX buzzer."""

__version__ = "0.1.0"

__all__ = [
    "knx_config",
    "knx_params",
    "logger",
    "modes",
    "scheduler",
]