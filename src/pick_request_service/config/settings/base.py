"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from ``<_prefix>_<FIELD>`` environment variables.

    Subclasses set ``_prefix`` and may override :meth:`_validate`, which runs
    after construction and raises ``InvalidSettingValueError``.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        pass

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """``ServiceSettings.env_key("routing_topic")`` -> ``"PICK_REQUEST_ROUTING_TOPIC"``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def as_log_dict(self) -> dict[str, Any]:
        """Field values for the startup log line; URLs are reduced to their scheme."""
        values = dataclasses.asdict(self)
        for name, value in values.items():
            if name.endswith("_url") and isinstance(value, str):
                values[name] = value.split("://", 1)[0] + "://***"
        return values


__all__ = ["Settings"]
