"""Sequential scenario resolution for a single player session."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from .choice import Choice
from .errors import LobusError, ScenarioError, ValidationError
from .menu import DefaultMenu, Menu, OutputSink, is_menu
from .scenario import Scenario
from .settings import Settings

logger = logging.getLogger(__name__)

ScenarioSource = Union[Scenario, Callable[[], Scenario]]
MenuCreator = Callable[[Any, OutputSink, Settings], Menu]


class Choices:
    """Walk an ordered list of scenarios and record the player's decisions.

    ``decisions`` maps each scenario name to the chosen choice id, or to
    ``False`` when the scenario's prerequisite failed and it was skipped.
    An instance serves one session and one call to :meth:`decide_all`.
    """

    def __init__(
        self,
        scenarios: Sequence[ScenarioSource],
        input_channel: Any,
        output_sink: OutputSink,
        *,
        use_custom_menu: bool = False,
        menu_creator: Optional[MenuCreator] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        if not scenarios or isinstance(scenarios, (str, bytes, Mapping)):
            raise ValidationError("Your choices must include a list of at least one scenario.")
        if not callable(getattr(input_channel, "readline", None)):
            raise ValidationError("You must specify an input channel with a readline() method.")
        if not callable(output_sink):
            raise ValidationError("You must specify a valid output sink function.")
        if use_custom_menu and not callable(menu_creator):
            raise ValidationError(
                "You must specify a valid menu_creator function when enabling menu override."
            )

        self.scenarios: List[ScenarioSource] = list(scenarios)
        self.input_channel = input_channel
        self.output_sink = output_sink
        self.settings = settings.copy() if isinstance(settings, Settings) else Settings()
        self.use_custom_menu = bool(use_custom_menu)
        self.menu_creator = menu_creator
        self.default_menu = DefaultMenu(input_channel, output_sink, self.settings)
        self.menu: Menu = self._build_menu()

        self.decisions: Dict[str, Union[str, bool]] = {}

    def _build_menu(self) -> Menu:
        if not self.use_custom_menu:
            return self.default_menu
        menu = self.menu_creator(self.input_channel, self.output_sink, self.settings)
        if not is_menu(menu):
            raise ValidationError(
                "menu_creator must return an object with render_menu() and await_selection()."
            )
        return menu

    def snapshot(self) -> Dict[str, Union[str, bool]]:
        return dict(self.decisions)

    async def decide_all(self) -> Dict[str, Union[str, bool]]:
        for source in self.scenarios:
            await self.decide(source)
        logger.info("Resolved %d scenario(s): %s", len(self.decisions), self.decisions)
        return self.decisions

    async def decide(self, scenario: ScenarioSource) -> None:
        scenario = _materialize(scenario)

        while True:
            if not scenario.should_ask(self.snapshot()):
                logger.debug("Skipping scenario '%s': prerequisite not met.", scenario.name)
                self.decisions[scenario.name] = False
                return

            if scenario.decided:
                return

            if not scenario.choices:
                raise ScenarioError(f"A scenario was made without any choices: {scenario.name}")

            valid_choices = self.valid_choices(scenario)
            await self.menu.render_menu(scenario, valid_choices)
            index = await self.menu.await_selection(scenario, valid_choices)

            if index is None or not 0 <= index < len(valid_choices):
                logger.info(
                    "Invalid selection %r for scenario '%s' (%d option(s)).",
                    index,
                    scenario.name,
                    len(valid_choices),
                )
                await self.default_menu.say(self.settings.invalid_message)
                continue

            selection = valid_choices[index]
            await self._apply_effect(selection, scenario)
            self.decisions[scenario.name] = selection.id
            logger.debug("Scenario '%s' decided: %s", scenario.name, selection.id)
            return

    def valid_choices(self, scenario: Scenario) -> List[Choice]:
        return [choice for choice in scenario.choices if choice.is_available(self.snapshot())]

    async def _apply_effect(self, choice: Choice, scenario: Scenario) -> None:
        result = choice.effect(scenario, self.snapshot())
        if inspect.isawaitable(result):
            await result

    @staticmethod
    def create_scenario(name: str, config: Mapping[str, Any]) -> Scenario:
        return Scenario(name, config)


def _materialize(source: ScenarioSource) -> Scenario:
    if isinstance(source, Scenario):
        return source
    if callable(source):
        scenario = source()
        if not isinstance(scenario, Scenario):
            raise ScenarioError(
                f"Functional scenarios must return an instance of Scenario. Got {scenario!r}"
            )
        return scenario
    raise ScenarioError(f"Expected a Scenario or a function returning one. Got {source!r}")


async def run(config: Mapping[str, Any]) -> Union[Dict[str, Union[str, bool]], str]:
    """Build an engine from ``config`` and resolve every scenario.

    Construction failures are logged and reported with the configured failure
    message instead of raising. Errors during resolution propagate.
    """

    options = dict(config or {})
    settings = options.get("settings")
    failure_message = (
        settings.failure_message if isinstance(settings, Settings) else Settings().failure_message
    )
    try:
        choices = Choices(
            options.get("scenarios"),
            options.get("input_channel"),
            options.get("output_sink"),
            use_custom_menu=options.get("use_custom_menu", False),
            menu_creator=options.get("menu_creator"),
            settings=settings,
        )
    except LobusError:
        logger.exception("Could not start scenario session.")
        return failure_message
    return await choices.decide_all()
