"""Text configuration for the scenario engine."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict

_BASE_DIR = Path(__file__).resolve().parent.parent
SETTINGS_PATH = _BASE_DIR / "lobus.json"

DEFAULT_INVALID_MESSAGE = "Invalid selection..."
DEFAULT_PROMPT = "|\r\n`-> "
DEFAULT_CHOICE_TEMPLATE = "| <cyan>[{index}]</cyan> {description}"
DEFAULT_FAILURE_MESSAGE = "Failed, please contact an Admin."

_TRUE_WORDS = {"true", "1", "yes", "on"}
_FALSE_WORDS = {"false", "0", "no", "off"}

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Strings the default menu and the ``run`` entry point emit."""

    invalid_message: str = DEFAULT_INVALID_MESSAGE
    prompt: str = DEFAULT_PROMPT
    choice_template: str = DEFAULT_CHOICE_TEMPLATE
    failure_message: str = DEFAULT_FAILURE_MESSAGE
    strip_colors: bool = False

    def normalize(self) -> "Settings":
        if not isinstance(self.invalid_message, str) or not self.invalid_message:
            self.invalid_message = DEFAULT_INVALID_MESSAGE
        if not isinstance(self.prompt, str):
            self.prompt = DEFAULT_PROMPT
        if not _valid_template(self.choice_template):
            self.choice_template = DEFAULT_CHOICE_TEMPLATE
        if not isinstance(self.failure_message, str) or not self.failure_message:
            self.failure_message = DEFAULT_FAILURE_MESSAGE
        self.strip_colors = bool(self.strip_colors)
        return self

    def copy(self) -> "Settings":
        return Settings.from_dict(self.to_dict())

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def format_choice(self, index: int, description: str) -> str:
        return self.choice_template.format(index=index, description=description)

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "Settings":
        if not isinstance(data, dict):
            return cls()

        settings = cls(
            invalid_message=_as_str(data, "invalid_message", DEFAULT_INVALID_MESSAGE),
            prompt=_as_str(data, "prompt", DEFAULT_PROMPT),
            choice_template=_as_str(data, "choice_template", DEFAULT_CHOICE_TEMPLATE),
            failure_message=_as_str(data, "failure_message", DEFAULT_FAILURE_MESSAGE),
            strip_colors=_as_bool(data, "strip_colors", False),
        )
        return settings.normalize()


def _as_str(data: Dict[str, Any], key: str, default: str) -> str:
    value = data.get(key, default)
    return value if isinstance(value, str) else default


def _as_bool(data: Dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if isinstance(value, str):
        value = value.strip().lower()
        if value in _TRUE_WORDS or value in _FALSE_WORDS:
            return value in _TRUE_WORDS
    if value is None:
        return default
    return bool(value)


def _valid_template(template: Any) -> bool:
    if not isinstance(template, str):
        return False
    try:
        template.format(index=1, description="")
    except (AttributeError, KeyError, IndexError, TypeError, ValueError):
        return False
    return True


def load_settings(path: Path | str = SETTINGS_PATH) -> Settings:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError:
        return Settings()
    except (OSError, json.JSONDecodeError, TypeError) as exc:
        logger.warning("Failed to read settings from %s: %s", path, exc)
        return Settings()
    return Settings.from_dict(data)
