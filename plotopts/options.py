"""Declaring command-line options, parsing arguments and producing help text."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Iterable

from .errors import (
    InvalidOptionFormatError,
    MissingArgumentError,
    OptionExistsError,
    OptionNotExistsError,
    OptionNotPresentError,
    OptionRequiresArgumentError,
    OptionSyntaxError,
)
from .helpformat import (
    OPTION_DESC_GAP,
    OPTION_LONGEST,
    HelpGroupDetails,
    HelpOptionDetails,
    format_description,
    format_option,
)
from .values import Value
from .values import value as make_value

_OPTION_MATCHER = re.compile(
    r"--([A-Za-z0-9][-_A-Za-z0-9]+)(=(.*))?|-([A-Za-z0-9]+)"
)
_OPTION_SPECIFIER = re.compile(
    r"(([A-Za-z0-9]),)?[ ]*([A-Za-z0-9][-_A-Za-z0-9]*)?"
)
_HELP_WIDTH = 76


@dataclass
class Option:
    """An option declaration: specifier such as ``"f,file"``, description and value."""

    opts: str
    desc: str
    value: Value = field(default_factory=lambda: make_value(bool))
    arg_help: str = ""


@dataclass(eq=False)
class OptionDetails:
    """A declared option and the value prototype its results are made from."""

    short: str
    long: str
    desc: str
    value: Value

    def make_storage(self) -> Value:
        return self.value.clone()


class OptionValue:
    """The parsed result of one option, with how often it appeared."""

    def __init__(self) -> None:
        self._value: Value | None = None
        self.count = 0
        self.has_default = False

    def _ensure_value(self, details: OptionDetails) -> Value:
        if self._value is None:
            self._value = details.make_storage()
        return self._value

    def parse(self, details: OptionDetails, text: str) -> None:
        storage = self._ensure_value(details)
        self.count += 1
        storage.parse(text)

    def parse_default(self, details: OptionDetails) -> None:
        storage = self._ensure_value(details)
        self.has_default = True
        storage.parse_default()

    def get(self) -> Any:
        """The parsed value; raises ValueError if the option has none."""
        if self._value is None:
            raise ValueError("No value")
        return self._value.result


@dataclass(frozen=True)
class KeyValue:
    """One option occurrence in command-line order: long name and raw text."""

    key: str
    value: str

    def parsed(self, kind: Any) -> Any:
        """The raw text converted as an option of the given kind would be."""
        converter = make_value(kind)
        converter.parse(self.value)
        return converter.result


class ParseResult:
    """The outcome of parsing an argument list against declared options."""

    def __init__(
        self,
        options: dict[str, OptionDetails],
        positional: list[str],
        allow_unrecognised: bool,
        argv: Iterable[str],
    ) -> None:
        self._options = options
        self._positional = list(positional)
        self._next_positional = 0
        self._allow_unrecognised = allow_unrecognised
        self._results: dict[OptionDetails, OptionValue] = {}
        self.arguments: list[KeyValue] = []
        self.unmatched: list[str] = []
        self._parse(list(argv))

    def count(self, option: str) -> int:
        details = self._options.get(option)
        if details is None:
            return 0
        return self._result(details).count

    def __getitem__(self, option: str) -> OptionValue:
        details = self._options.get(option)
        if details is None:
            raise OptionNotPresentError(option)
        return self._result(details)

    def _result(self, details: OptionDetails) -> OptionValue:
        return self._results.setdefault(details, OptionValue())

    def _parse_option(self, details: OptionDetails, arg: str) -> None:
        self._result(details).parse(details, arg)
        self.arguments.append(KeyValue(details.long, arg))

    def _add_to_option(self, option: str, arg: str) -> None:
        details = self._options.get(option)
        if details is None:
            raise OptionNotExistsError(option)
        self._parse_option(details, arg)

    def _checked_parse_arg(
        self, args: list[str], current: int, details: OptionDetails, name: str
    ) -> int:
        if details.value.has_implicit:
            self._parse_option(details, details.value.implicit_text)
        elif current + 1 >= len(args):
            raise MissingArgumentError(name)
        else:
            self._parse_option(details, args[current + 1])
            current += 1
        return current

    def _consume_positional(self, arg: str) -> bool:
        while self._next_positional < len(self._positional):
            name = self._positional[self._next_positional]
            details = self._options.get(name)
            if details is None:
                raise OptionNotExistsError(name)
            if details.value.is_container:
                self._add_to_option(name, arg)
                return True
            self._next_positional += 1
            if self._result(details).count == 0:
                self._add_to_option(name, arg)
                return True
        return False

    def _parse_short(self, letters: str, args: list[str], current: int) -> int:
        for position, name in enumerate(letters):
            details = self._options.get(name)
            if details is None:
                if self._allow_unrecognised:
                    continue
                raise OptionNotExistsError(name)
            if position + 1 == len(letters):
                current = self._checked_parse_arg(args, current, details, name)
            elif details.value.has_implicit:
                self._parse_option(details, details.value.implicit_text)
            else:
                raise OptionRequiresArgumentError(name)
        return current

    def _parse(self, args: list[str]) -> None:
        current = 1
        consume_remaining = False

        while current < len(args):
            arg = args[current]
            if arg == "--":
                consume_remaining = True
                current += 1
                break

            match = _OPTION_MATCHER.fullmatch(arg)
            if match is None:
                if arg.startswith("-") and len(arg) > 1 and not self._allow_unrecognised:
                    raise OptionSyntaxError(arg)
                if not self._consume_positional(arg):
                    self.unmatched.append(arg)
            elif match.group(4):
                current = self._parse_short(match.group(4), args, current)
            elif match.group(1):
                name = match.group(1)
                details = self._options.get(name)
                if details is None:
                    if not self._allow_unrecognised:
                        raise OptionNotExistsError(name)
                    self.unmatched.append(arg)
                elif match.group(2) is not None:
                    self._parse_option(details, match.group(3))
                else:
                    current = self._checked_parse_arg(args, current, details, name)
            current += 1

        for details in self._options.values():
            store = self._result(details)
            if details.value.has_default and not store.count and not store.has_default:
                store.parse_default(details)

        if consume_remaining:
            while current < len(args) and self._consume_positional(args[current]):
                current += 1
            self.unmatched.extend(args[current:])


class Options:
    """A set of declared options, grouped for help output."""

    def __init__(self, program: str, help_string: str = "") -> None:
        self.program = program
        self.help_string = help_string
        self._custom_help = "[OPTION...]"
        self._positional_help = "positional parameters"
        self._show_positional = False
        self._allow_unrecognised = False
        self._options: dict[str, OptionDetails] = {}
        self._positional: list[str] = []
        self._positional_set: set[str] = set()
        self._help: dict[str, HelpGroupDetails] = {}

    def positional_help(self, text: str) -> Options:
        self._positional_help = text
        return self

    def custom_help(self, text: str) -> Options:
        self._custom_help = text
        return self

    def show_positional_help(self) -> Options:
        self._show_positional = True
        return self

    def allow_unrecognised_options(self) -> Options:
        self._allow_unrecognised = True
        return self

    def parse(self, argv: Iterable[str]) -> ParseResult:
        """Parse ``argv``, whose first item is the program name and is skipped."""
        return ParseResult(
            self._options, self._positional, self._allow_unrecognised, argv
        )

    def add_options(self, group: str = "", *args: Option) -> OptionAdder:
        """Add the given options to ``group``; returns an adder for more."""
        adder = OptionAdder(self, group)
        for option in args:
            adder(option.opts, option.desc, option.value, option.arg_help)
        return adder

    def add_option(
        self,
        group: str,
        short: str,
        long: str,
        desc: str,
        value: Value | None = None,
        arg_help: str = "",
    ) -> None:
        if value is None:
            value = make_value(bool)
        details = OptionDetails(short, long, desc, value)
        if short:
            self._add_one_option(short, details)
        if long:
            self._add_one_option(long, details)

        entry = self._help.setdefault(group, HelpGroupDetails())
        entry.options.append(
            HelpOptionDetails(
                short,
                long,
                desc,
                value.has_default,
                value.default_text,
                value.has_implicit,
                value.implicit_text,
                arg_help,
                value.is_container,
                value.is_boolean,
            )
        )

    def _add_one_option(self, name: str, details: OptionDetails) -> None:
        if name in self._options:
            raise OptionExistsError(name)
        self._options[name] = details

    def parse_positional(self, options: str | Iterable[str]) -> None:
        """Send positional arguments to these options, in order."""
        if isinstance(options, str):
            options = [options]
        self._positional = list(options)
        self._positional_set.update(self._positional)

    def _is_hidden(self, details: HelpOptionDetails) -> bool:
        return details.long in self._positional_set and not self._show_positional

    def _help_one_group(self, name: str) -> str:
        group = self._help.get(name)
        if group is None:
            return ""

        parts = [f" {name} options:\n"] if name else []
        shown = [o for o in group.options if not self._is_hidden(o)]
        formatted = [format_option(o) for o in shown]

        longest = min(max((len(s) for s in formatted), default=0), OPTION_LONGEST)
        allowed = _HELP_WIDTH - longest - OPTION_DESC_GAP
        column = longest + OPTION_DESC_GAP

        for details, left in zip(shown, formatted):
            parts.append(left)
            if len(left) > longest:
                parts.append("\n" + " " * column)
            else:
                parts.append(" " * (column - len(left)))
            parts.append(format_description(details, column, allowed))
            parts.append("\n")
        return "".join(parts)

    def help(self, groups: Iterable[str] | None = None) -> str:
        """The full help text, for the given groups or for all of them."""
        parts = [f"{self.help_string}\nUsage:\n  {self.program} {self._custom_help}"]
        if self._positional and self._positional_help:
            parts.append(f" {self._positional_help}")
        parts.append("\n\n")

        selected = list(groups) if groups else self.groups()
        for index, name in enumerate(selected):
            text = self._help_one_group(name)
            if not text:
                continue
            parts.append(text)
            if index < len(selected) - 1:
                parts.append("\n")
        return "".join(parts)

    def groups(self) -> list[str]:
        return sorted(self._help)

    def group_help(self, group: str) -> HelpGroupDetails:
        return self._help[group]


class OptionAdder:
    """Adds options to one group; calls can be chained."""

    def __init__(self, options: Options, group: str) -> None:
        self._options = options
        self._group = group

    def __call__(
        self,
        opts: str,
        desc: str,
        value: Value | None = None,
        arg_help: str = "",
    ) -> OptionAdder:
        match = _OPTION_SPECIFIER.fullmatch(opts)
        if match is None:
            raise InvalidOptionFormatError(opts)

        short = match.group(2) or ""
        long = match.group(3) or ""
        if not short and not long:
            raise InvalidOptionFormatError(opts)
        if len(long) == 1 and short:
            raise InvalidOptionFormatError(opts)
        if len(long) == 1:
            short, long = long, short

        self._options.add_option(
            self._group,
            short,
            long,
            desc,
            value if value is not None else make_value(bool),
            arg_help,
        )
        return self