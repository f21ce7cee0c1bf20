from . import (
    const,
    dump,
    extract,
)
from .args import Args
from .parser import (
    ParseError,
    ParserContext,
    UnknownArgument,
    parse,
    parseWithContext,
    tokenize,
)
from .tokens import (
    ArgDef,
    ArgName,
    Argument,
    FlagArg,
    OptionArg,
    PositionalArg,
    argDef,
)

__all__ = [
    "Args",
    "ArgDef",
    "ArgName",
    "Argument",
    "FlagArg",
    "OptionArg",
    "ParseError",
    "ParserContext",
    "PositionalArg",
    "UnknownArgument",
    "argDef",
    "const",
    "dump",
    "extract",
    "parse",
    "parseWithContext",
    "tokenize",
]
