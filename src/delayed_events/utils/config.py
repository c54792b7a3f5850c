from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import json

from pydantic import BaseModel, Field, field_validator

from delayed_events.application.delayed_event_publisher import DelayArbiter, DelayedEventPublisher
from delayed_events.application.event_publisher import EventPublisher
from delayed_events.application.failure_handlers import LoggingFailureHandler


class DelayConfigError(ValueError):
    """Raised when a delayed-publishing configuration file cannot be used."""


class DelayedPublishingConfig(BaseModel):
    disabled: bool = False
    delayed_event_names: list[str] | None = Field(None)
    on_failure: Literal["raise", "log"] = "raise"

    @field_validator("delayed_event_names")
    @classmethod
    def _validate_event_names(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return value
        if any(not name.strip() for name in value):
            raise ValueError("delayed_event_names must not contain blank names.")
        return value


def load_delay_config(path: Path) -> DelayedPublishingConfig:
    data = _load_config_data(path)
    if not isinstance(data, dict):
        raise DelayConfigError(f"{path} must contain a mapping at the top level.")
    return DelayedPublishingConfig.model_validate(data)


def build_delayed_publisher(publisher: EventPublisher, config: DelayedPublishingConfig) -> DelayedEventPublisher:
    delay_arbiter = None
    if config.delayed_event_names is not None:
        delay_arbiter = _named_event_arbiter(frozenset(config.delayed_event_names))

    failure_handler = LoggingFailureHandler() if config.on_failure == "log" else None

    return DelayedEventPublisher(
        publisher,
        disabled=config.disabled,
        delay_arbiter=delay_arbiter,
        failure_handler=failure_handler,
    )


def _named_event_arbiter(names: frozenset[str]) -> DelayArbiter:
    def arbiter(event: Any, event_name: str | None = None) -> bool:
        return (event_name if event_name is not None else type(event).__name__) in names

    return arbiter


def _load_config_data(path: Path) -> Any:
    if path.suffix.lower() in {".yaml", ".yml"}:
        try:
            import yaml
        except ImportError as exc:
            raise ImportError("PyYAML is required to load YAML configs.") from exc

        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle) or {}

    if path.suffix.lower() != ".json":
        raise DelayConfigError(f"Unsupported config format: {path.suffix or '<none>'}")

    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)
