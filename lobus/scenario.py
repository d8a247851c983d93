"""Scenario definitions: a named, ordered group of choices."""

from __future__ import annotations

from typing import Any, Callable, List, Mapping, Optional

from .choice import Choice, Decisions
from .errors import ValidationError

DEFAULT_TITLE = "Choose wisely"

ScenarioPrerequisite = Callable[[Decisions], bool]


class Scenario:
    """One decision point presented to the player.

    ``config`` may carry ``title``, ``description`` and ``prerequisite``. At
    least one of ``title`` or ``description`` is required; the title falls
    back to ``DEFAULT_TITLE``.
    """

    def __init__(self, name: str, config: Mapping[str, Any] | None) -> None:
        if not name or config is None:
            raise ValidationError("Your scenario must have a name and a configuration.")
        if not isinstance(config, Mapping):
            raise ValidationError(f"Scenario '{name}' configuration must be a mapping.")
        if not config.get("title") and not config.get("description"):
            raise ValidationError(
                f"Scenario '{name}' must have either a title or a description."
            )

        prerequisite = config.get("prerequisite")

        self.name = name
        self.title: str = config.get("title") or DEFAULT_TITLE
        self.description: str = config.get("description") or ""
        self.prerequisite: Optional[ScenarioPrerequisite] = (
            prerequisite if callable(prerequisite) else None
        )
        self.config = config
        # Reserved for marking a scenario permanently resolved; never set by the engine.
        self.decided = False
        self.choices: List[Choice] = []

    def add_choices(self, choices: Mapping[str, Mapping[str, Any]]) -> "Scenario":
        if not isinstance(choices, Mapping):
            raise ValidationError(
                f"Scenario '{self.name}' choices must be a mapping of id to choice config."
            )
        for choice_id, choice_config in choices.items():
            self.choices.append(Choice(choice_id, choice_config))
        return self

    def set_prerequisite(self, predicate: ScenarioPrerequisite) -> "Scenario":
        if self.prerequisite is not None or not callable(predicate):
            raise ValidationError(
                "You can only provide one prerequisite per scenario, and it must be callable."
            )
        self.prerequisite = predicate
        return self

    def should_ask(self, decisions: Decisions) -> bool:
        if self.prerequisite is None:
            return True
        return bool(self.prerequisite(decisions))

    def __repr__(self) -> str:
        return f"Scenario({self.name!r}, choices={[choice.id for choice in self.choices]!r})"
