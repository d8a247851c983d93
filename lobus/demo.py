#!/usr/bin/env python3
"""
Character creation walkthrough.
- A moral choice shapes starting attributes.
- A career choice is gated on that moral choice.
Usage: python3 -m lobus [--settings lobus.json] [--plain] [--verbose]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any, Dict, List, Sequence

from .channel import StdinChannel
from .choices import Choices, run
from .errors import ChannelClosed
from .formatting import console_sink
from .scenario import Scenario
from .settings import SETTINGS_PATH, load_settings


def new_sheet() -> Dict[str, Any]:
    return {
        "attributes": {"willpower": 10, "might": 10},
        "class": None,
    }


def build_scenarios(sheet: Dict[str, Any]) -> List[Scenario]:
    def be_good(scenario, decisions):
        sheet["attributes"]["willpower"] += 1

    def be_bad(scenario, decisions):
        sheet["attributes"]["might"] += 1

    def set_class(name):
        def effect(scenario, decisions):
            sheet["class"] = name
        return effect

    tough_choice = Choices.create_scenario(
        "toughChoice",
        {
            "title": "Make a tough decision",
            "description": "This will have an effect on your character's starting attributes.",
        },
    ).add_choices(
        {
            "beGood": {"description": "Do the right thing", "effect": be_good},
            "beBad": {"description": "Do the wrong thing via brute force.", "effect": be_bad},
        }
    )

    job = Choices.create_scenario(
        "job",
        {
            "title": "Choose a career path",
            "description": "This will have an effect on your character's starting skills.",
        },
    ).add_choices(
        {
            "bePaladin": {
                "description": "Become a paladin",
                "effect": set_class("paladin"),
                "prerequisite": lambda decisions: decisions.get("toughChoice") != "beBad",
            },
            "beThief": {
                "description": "Become a thief",
                "effect": set_class("thief"),
                "prerequisite": lambda decisions: decisions.get("toughChoice") == "beBad",
            },
            "beCommoner": {
                "description": "Stay a commoner",
                "effect": set_class("commoner"),
            },
        }
    )

    return [tough_choice, job]


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the character creation scenarios.")
    parser.add_argument(
        "--settings",
        default=str(SETTINGS_PATH),
        help="Path to a JSON settings file.",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Strip color tags instead of rendering ANSI colors.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


async def play(settings, *, plain: bool = False) -> int:
    sheet = new_sheet()
    say = console_sink(strip=plain or settings.strip_colors)
    result = await run(
        {
            "scenarios": build_scenarios(sheet),
            "input_channel": StdinChannel(),
            "output_sink": say,
            "settings": settings,
        }
    )
    if isinstance(result, str):
        say(result)
        return 1

    say("")
    for name, decision in result.items():
        say(f"{name}: {decision if decision is not False else '(skipped)'}")
    attributes = ", ".join(f"{key}={value}" for key, value in sorted(sheet["attributes"].items()))
    say(f"Class: {sheet['class'] or '-'} | {attributes}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings(args.settings)
    try:
        return asyncio.run(play(settings, plain=args.plain))
    except KeyboardInterrupt:
        print("\n[Interrupted] Bye.")
        return 130
    except ChannelClosed:
        print("\n[Input closed] Bye.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
