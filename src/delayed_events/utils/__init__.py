from .config import (
    DelayConfigError,
    DelayedPublishingConfig,
    build_delayed_publisher,
    load_delay_config,
)

__all__ = [
    "DelayConfigError",
    "DelayedPublishingConfig",
    "build_delayed_publisher",
    "load_delay_config",
]
