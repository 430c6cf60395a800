"""Domain – automation-system identifiers and the auto-forward allow-list."""
from __future__ import annotations

from collections.abc import Collection

DEFAULT_KNOWN_AUTOMATION_SYSTEMS: frozenset[str] = frozenset({"iws"})


def automation_system_type(automation_system_identifier: str) -> str:
    """``"IWS-STO-1"`` -> ``"iws"``: the token before the first ``-``, lowercased."""
    return automation_system_identifier.split("-", 1)[0].lower()


def is_known_automation_system(
    automation_system_identifier: str,
    known: Collection[str] = DEFAULT_KNOWN_AUTOMATION_SYSTEMS,
) -> bool:
    return automation_system_type(automation_system_identifier) in known


__all__ = [
    "DEFAULT_KNOWN_AUTOMATION_SYSTEMS",
    "automation_system_type",
    "is_known_automation_system",
]
