import dataclasses as dt

from typing import Optional

from . import const


@dt.dataclass(frozen=True)
class ArgName:
    """
    The name of a flag or an option as it appeared on the command line.

    Attributes:
        name: The name without its dashes (e.g. "file" for "--file", "f" for "-f").
        short: True if the name was given in short form.
    """

    name: str
    short: bool = False

    def __str__(self) -> str:
        prefix = const.SHORT_PREFIX if self.short else const.LONG_PREFIX
        return f"{prefix}{self.name}"


@dt.dataclass(frozen=True)
class Argument:
    """
    Base class for classified command-line arguments.
    """

    pass


@dt.dataclass(frozen=True)
class PositionalArg(Argument):
    """
    An argument identified by its position.

    Attributes:
        value: The raw token.
        afterSeparator: True if the token followed a bare "--".
    """

    value: str
    afterSeparator: bool = False


@dt.dataclass(frozen=True)
class FlagArg(Argument):
    """A boolean presence flag, e.g. "-f" or "--verbose"."""

    name: ArgName


@dt.dataclass(frozen=True)
class OptionArg(Argument):
    """A named argument carrying a string value, e.g. "--name=value"."""

    name: ArgName
    value: str


@dt.dataclass(frozen=True)
class ArgDef:
    """
    The definition of a known argument, used to look arguments up
    and to validate names in `parseWithContext`.
    """

    shortName: Optional[str] = None
    longName: Optional[str] = None
    description: str = ""

    def __post_init__(self):
        if self.shortName is None and self.longName is None:
            raise ValueError("An argument needs a short or a long name")

        if self.shortName is not None and len(self.shortName) != 1:
            raise ValueError(
                f"Short argument name '{self.shortName}' must be a single character"
            )

    def matches(self, other: ArgName) -> bool:
        if other.short:
            return self.shortName == other.name
        return self.longName == other.name

    def __str__(self) -> str:
        flag = ""
        if self.shortName:
            flag += f"-{self.shortName}"

        if self.longName:
            if flag:
                flag += ", "
            flag += f"--{self.longName}"
        return flag


def argDef(
    shortName: str | None = None,
    longName: str | None = None,
    description: str = "",
) -> ArgDef:
    """
    Defines a known command-line argument.

    Args:
        shortName: The short name of the argument (e.g., "f" for "-f").
        longName: The long name of the argument (e.g., "file" for "--file").
        description: A description of the argument.
    """
    return ArgDef(shortName, longName, description)
