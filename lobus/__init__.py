"""Branching choice scenarios resolved one decision at a time."""

from .choice import Choice
from .choices import Choices, run
from .errors import ChannelClosed, LobusError, ScenarioError, ValidationError
from .scenario import Scenario

__all__ = [
    "ChannelClosed",
    "Choice",
    "Choices",
    "LobusError",
    "Scenario",
    "ScenarioError",
    "ValidationError",
    "run",
]
