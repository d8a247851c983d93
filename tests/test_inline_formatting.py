import io

from lobus.formatting import ANSI_RESET, console_sink, format_tags, strip_tags


def test_format_tags_applies_color_wrappers() -> None:
    text = "| <cyan>[1]</cyan> Take the <red>cursed</red> <bold>blade</bold>"

    formatted = format_tags(text)

    assert f"\033[36m[1]{ANSI_RESET}" in formatted
    assert f"\033[31mcursed{ANSI_RESET}" in formatted
    assert f"\033[1mblade{ANSI_RESET}" in formatted
    assert "<cyan>" not in formatted


def test_unknown_tags_keep_their_text() -> None:
    assert format_tags("<sparkle>shiny</sparkle> and a < b") == "shiny and a < b"


def test_strip_tags_handles_nesting() -> None:
    assert strip_tags("<bold>Be <cyan>brave</cyan></bold>") == "Be brave"


def test_console_sink_writes_formatted_lines() -> None:
    stream = io.StringIO()
    say = console_sink(strip=True, stream=stream)

    say("| <cyan>[2]</cyan> Flee")

    assert stream.getvalue() == "| [2] Flee\n"
