"""A single selectable option inside a scenario."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Mapping, Optional

from .errors import ValidationError

Decisions = Mapping[str, Any]
Effect = Callable[[Any, Decisions], Optional[Awaitable[None]]]
Prerequisite = Callable[[Decisions], bool]


def _no_effect(scenario, decisions) -> None:
    return None


def _always(decisions) -> bool:
    return True


class Choice:
    def __init__(
        self,
        id: str,
        config: Mapping[str, Any] | None = None,
        **options: Any,
    ) -> None:
        if config is None:
            config = {}
        if not isinstance(config, Mapping):
            raise ValidationError(f"Choice '{id}' config must be a mapping.")
        merged = {**config, **options}

        description = merged.get("description")
        if not isinstance(description, str) or not description.strip():
            raise ValidationError(f"Choice '{id}' should have a description.")

        effect = merged.get("effect")
        prerequisite = merged.get("prerequisite")

        self.id = id
        self.description = description
        self.effect: Effect = effect if callable(effect) else _no_effect
        self.prerequisite: Prerequisite = prerequisite if callable(prerequisite) else _always

    def is_available(self, decisions: Decisions) -> bool:
        return bool(self.prerequisite(decisions))

    def __repr__(self) -> str:
        return f"Choice({self.id!r}, description={self.description!r})"
