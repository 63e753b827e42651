"""Layout of option names and wrapped descriptions for help output."""

from __future__ import annotations

from dataclasses import dataclass, field

OPTION_LONGEST = 30
OPTION_DESC_GAP = 2


@dataclass
class HelpOptionDetails:
    """Everything the help text needs to know about one option."""

    short: str
    long: str
    desc: str
    has_default: bool = False
    default_value: str = ""
    has_implicit: bool = False
    implicit_value: str = ""
    arg_help: str = ""
    is_container: bool = False
    is_boolean: bool = False


@dataclass
class HelpGroupDetails:
    """A named group of options as shown in the help text."""

    name: str = ""
    description: str = ""
    options: list[HelpOptionDetails] = field(default_factory=list)


def format_option(details: HelpOptionDetails) -> str:
    """Render the left column: short and long names and the argument hint."""
    parts = ["  "]
    if details.short:
        parts.append(f"-{details.short},")
    else:
        parts.append("   ")

    if details.long:
        parts.append(f" --{details.long}")

    arg = details.arg_help or "arg"
    if not details.is_boolean:
        if details.has_implicit:
            parts.append(f" [={arg}(={details.implicit_value})]")
        else:
            parts.append(f" {arg}")

    return "".join(parts)


def _full_description(details: HelpOptionDetails) -> str:
    desc = details.desc
    if details.has_default and (
        not details.is_boolean or details.default_value != "false"
    ):
        if details.default_value:
            desc += f" (default: {details.default_value})"
        else:
            desc += ' (default: "")'
    return desc


def format_description(details: HelpOptionDetails, start: int, width: int) -> str:
    """Render the description, wrapped to ``width`` and indented by ``start``."""
    desc = _full_description(details)
    indent = " " * start
    pieces: list[str] = []

    start_line = 0
    last_space = 0
    size = 0

    for current, char in enumerate(desc):
        if char == " ":
            last_space = current

        if char == "\n":
            start_line = current + 1
            last_space = start_line
        elif size > width:
            if last_space == start_line:
                pieces.append(desc[start_line:current + 1])
                pieces.append("\n")
                pieces.append(indent)
                start_line = current + 1
                last_space = start_line
            else:
                pieces.append(desc[start_line:last_space])
                pieces.append("\n")
                pieces.append(indent)
                start_line = last_space + 1
            size = 0
        else:
            size += 1

    pieces.append(desc[start_line:])
    return "".join(pieces)