"""Exceptions raised while declaring options and while parsing arguments."""

LQUOTE = "\u2018"
RQUOTE = "\u2019"


def _quoted(text: str) -> str:
    return f"{LQUOTE}{text}{RQUOTE}"


class OptionError(Exception):
    """Base class of every option error."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class OptionSpecError(OptionError):
    """An option was declared incorrectly."""


class OptionParseError(OptionError):
    """The arguments could not be parsed against the declared options."""


class OptionExistsError(OptionSpecError):
    """An option with the same name has already been declared."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Option {_quoted(option)} already exists")
        self.option = option


class InvalidOptionFormatError(OptionSpecError):
    """An option specifier such as ``"f,file"`` is malformed."""

    def __init__(self, format: str) -> None:
        super().__init__(f"Invalid option format {_quoted(format)}")
        self.format = format


class OptionSyntaxError(OptionParseError):
    """An argument starts with a dash but is not a valid option."""

    def __init__(self, text: str) -> None:
        super().__init__(
            f"Argument {_quoted(text)} starts with a - but has incorrect syntax"
        )
        self.text = text


class OptionNotExistsError(OptionParseError):
    """An argument names an option that was never declared."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Option {_quoted(option)} does not exist")
        self.option = option


class MissingArgumentError(OptionParseError):
    """An option that needs an argument came last on the command line."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Option {_quoted(option)} is missing an argument")
        self.option = option


class OptionRequiresArgumentError(OptionParseError):
    """An option inside a group of short flags needs an argument."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Option {_quoted(option)} requires an argument")
        self.option = option


class OptionNotHasArgumentError(OptionParseError):
    """An argument was given to an option that takes none."""

    def __init__(self, option: str, arg: str) -> None:
        super().__init__(
            f"Option {_quoted(option)} does not take an argument, "
            f"but argument {_quoted(arg)} given"
        )
        self.option = option
        self.arg = arg


class OptionNotPresentError(OptionParseError):
    """A result was requested for an option that is unknown."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Option {_quoted(option)} not present")
        self.option = option


class ArgumentIncorrectTypeError(OptionParseError):
    """An argument could not be converted to the option's type."""

    def __init__(self, arg: str) -> None:
        super().__init__(f"Argument {_quoted(arg)} failed to parse")
        self.arg = arg


class OptionRequiredError(OptionParseError):
    """A required option did not appear."""

    def __init__(self, option: str) -> None:
        super().__init__(f"Option {_quoted(option)} is required but not present")
        self.option = option