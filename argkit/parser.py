import logging

from typing import Optional, Sequence

from . import const
from .args import Args
from .tokens import ArgDef, ArgName, Argument, FlagArg, OptionArg, PositionalArg

_logger = logging.getLogger(__name__)


class ParseError(ValueError):
    pass


class UnknownArgument(ParseError):
    name: ArgName

    def __init__(self, name: ArgName):
        super().__init__(f"Unknown argument '{name}'")
        self.name = name


# --- Tokenizer -------------------------------------------------------------- #


def _takesValue(following: Optional[str]) -> bool:
    """A following token is only consumed as a value if it doesn't look like a flag."""
    return following is not None and not following.startswith(const.SHORT_PREFIX)


def parseLong(arg: str, following: Optional[str]) -> tuple[list[Argument], bool]:
    """
    Parses a long form argument ("--name", "--name=value").

    Args:
        arg: The token, starting with "--".
        following: The following token, or None at the end of the input.

    Returns:
        The resulting arguments and whether `following` was consumed as a value.
    """
    body = arg[len(const.LONG_PREFIX) :]
    if const.VALUE_DELIMITER in body:
        name, value = body.split(const.VALUE_DELIMITER, 1)
        if not name:
            return [PositionalArg(arg)], False
        return [OptionArg(ArgName(name), value)], False

    if _takesValue(following):
        assert following is not None
        return [OptionArg(ArgName(body), following)], True

    return [FlagArg(ArgName(body))], False


def parseShort(arg: str, following: Optional[str]) -> tuple[list[Argument], bool]:
    """
    Parses a short form argument ("-f", "-abc", "-f value", "-f=value").

    Every character after the dash is a name of its own, and all of them
    receive the value when there is one.
    """
    body = arg[len(const.SHORT_PREFIX) :]
    if const.VALUE_DELIMITER in body:
        names, value = body.split(const.VALUE_DELIMITER, 1)
        if not names:
            return [PositionalArg(arg)], False
        return [OptionArg(ArgName(c, True), value) for c in names], False

    if _takesValue(following):
        assert following is not None
        return [OptionArg(ArgName(c, True), following) for c in body], True

    return [FlagArg(ArgName(c, True)) for c in body], False


def tokenize(tokens: Sequence[str]) -> list[Argument]:
    """Classifies a list of command-line tokens in a single pass."""
    res: list[Argument] = []
    i = 0
    while i < len(tokens):
        arg = tokens[i]
        following = tokens[i + 1] if i + 1 < len(tokens) else None
        i += 1

        if arg == const.SEPARATOR:
            res.extend(PositionalArg(rest, True) for rest in tokens[i:])
            break

        consumed = False
        if arg.startswith(const.LONG_PREFIX):
            parsed, consumed = parseLong(arg, following)
        elif arg.startswith(const.SHORT_PREFIX) and len(arg) > 1:
            parsed, consumed = parseShort(arg, following)
        else:
            parsed = [PositionalArg(arg)]

        res.extend(parsed)
        if consumed:
            i += 1

    return res


def parse(tokens: Sequence[str]) -> Args:
    """
    Parses command-line tokens (without the program name) into an `Args`.

    Any sequence of strings is accepted; names are not validated.
    """
    arguments = tokenize(tokens)
    _logger.debug(f"Parsed {len(tokens)} tokens into {len(arguments)} arguments")
    return Args(arguments)


# --- Context ---------------------------------------------------------------- #


class ParserContext:
    """
    A registry of known argument definitions.
    """

    _defs: list[ArgDef]
    _shortMap: dict[str, int]
    _longMap: dict[str, int]

    def __init__(self):
        self._defs = []
        self._shortMap = {}
        self._longMap = {}

    @staticmethod
    def fromDefs(defs: Sequence[ArgDef]) -> "ParserContext":
        ctx = ParserContext()
        for d in defs:
            ctx.register(d)
        return ctx

    @property
    def defs(self) -> list[ArgDef]:
        return list(self._defs)

    def register(self, argDef: ArgDef) -> "ParserContext":
        """Registers `argDef`, refusing names that are already defined."""
        if argDef.shortName is not None and argDef.shortName in self._shortMap:
            raise ValueError(f"Short argument -{argDef.shortName} already defined")

        if argDef.longName is not None and argDef.longName in self._longMap:
            raise ValueError(f"Long argument --{argDef.longName} already defined")

        _logger.info(f"Registering argument '{argDef}'")
        index = len(self._defs)
        if argDef.shortName is not None:
            self._shortMap[argDef.shortName] = index
        if argDef.longName is not None:
            self._longMap[argDef.longName] = index
        self._defs.append(argDef)
        return self

    def lookup(self, name: ArgName) -> Optional[ArgDef]:
        index = (self._shortMap if name.short else self._longMap).get(name.name)
        if index is None:
            return None
        return self._defs[index]

    def knows(self, name: ArgName) -> bool:
        return self.lookup(name) is not None


def parseWithContext(tokens: Sequence[str], ctx: ParserContext) -> Args:
    """
    Parses like `parse`, but every flag and option name must be known to `ctx`.

    Raises:
        UnknownArgument: For the first name `ctx` doesn't define.
    """
    arguments = tokenize(tokens)
    for arg in arguments:
        if isinstance(arg, (FlagArg, OptionArg)) and not ctx.knows(arg.name):
            raise UnknownArgument(arg.name)
    return Args(arguments)
