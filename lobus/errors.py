"""Exception types raised by the scenario engine."""

from __future__ import annotations


class LobusError(Exception):
    """Base class for scenario engine failures."""


class ValidationError(LobusError):
    """Raised when a choice, scenario or engine is configured incorrectly."""


class ScenarioError(LobusError):
    """Raised when a scenario cannot be resolved."""


class ChannelClosed(LobusError):
    """Raised when reading from an input channel that has been closed."""
