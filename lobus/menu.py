"""Menu presentation and selection for a single scenario."""

from __future__ import annotations

import inspect
import re
from typing import Any, Callable, Optional, Sequence

from .choice import Choice
from .formatting import strip_tags
from .scenario import Scenario
from .settings import Settings

OutputSink = Callable[[str], Any]

SELECTION_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")


def parse_selection(raw: Any) -> Optional[int]:
    """Turn a 1-based menu entry into a 0-based index, or ``None``."""

    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    if raw is None:
        return None
    # Optional sign then ASCII digits, so "2\r", "+2" and "2 please" all select entry 2.
    match = SELECTION_PATTERN.match(str(raw))
    if match is None:
        return None
    number = int(match.group(1))
    if number < 1:
        return None
    return number - 1


class Menu:
    """Capability interface for presenting a scenario and reading a selection."""

    async def render_menu(self, scenario: Scenario, choices: Sequence[Choice]) -> None:
        raise NotImplementedError

    async def await_selection(
        self, scenario: Scenario, choices: Sequence[Choice]
    ) -> Optional[int]:
        raise NotImplementedError


class DefaultMenu(Menu):
    def __init__(
        self, input_channel, output_sink: OutputSink, settings: Settings | None = None
    ) -> None:
        self.input_channel = input_channel
        self.output_sink = output_sink
        self.settings = settings or Settings()

    async def say(self, line: str) -> None:
        if self.settings.strip_colors:
            line = strip_tags(line)
        result = self.output_sink(line)
        if inspect.isawaitable(result):
            await result

    async def render_menu(self, scenario: Scenario, choices: Sequence[Choice]) -> None:
        await self.say("")
        await self.say(scenario.title)
        if scenario.description:
            await self.say(scenario.description)
        await self.say("")
        for index, choice in enumerate(choices, start=1):
            await self.say(self.settings.format_choice(index, choice.description))
        await self.say(self.settings.prompt)

    async def await_selection(
        self, scenario: Scenario, choices: Sequence[Choice]
    ) -> Optional[int]:
        raw = await self.input_channel.readline()
        return parse_selection(raw)


def is_menu(candidate: Any) -> bool:
    return callable(getattr(candidate, "render_menu", None)) and callable(
        getattr(candidate, "await_selection", None)
    )
