from typing import Iterator, Optional, Sequence, TypeVar

from . import extract
from .tokens import ArgDef, Argument, FlagArg, OptionArg, PositionalArg

T = TypeVar("T")
A = TypeVar("A", bound=Argument)


class Args:
    """
    The result of a parse: flags, options and positionals.

    An `Args` is built once from the classified arguments and is never
    modified afterward. Every accessor returns a copy.
    """

    _arguments: tuple[Argument, ...]
    _flags: set[str]
    _opts: dict[str, str]
    _args: list[str]
    _extras: list[str]

    def __init__(self, arguments: Sequence[Argument] = ()):
        self._arguments = tuple(arguments)
        self._flags = set()
        self._opts = {}
        self._args = []
        self._extras = []

        for arg in self._arguments:
            if isinstance(arg, FlagArg):
                self._flags.add(arg.name.name)
            elif isinstance(arg, OptionArg):
                # Last occurrence wins
                self._opts[arg.name.name] = arg.value
            elif isinstance(arg, PositionalArg):
                self._args.append(arg.value)
                if arg.afterSeparator:
                    self._extras.append(arg.value)

    def __iter__(self) -> Iterator[Argument]:
        return iter(self._arguments)

    def __len__(self) -> int:
        return len(self._arguments)

    def __repr__(self) -> str:
        return f"Args(flags={sorted(self._flags)!r}, options={self._opts!r}, positionals={self._args!r})"

    def hasFlag(self, name: str) -> bool:
        """True if `name` was supplied, either as a flag or as an option."""
        return name in self._flags or name in self._opts

    def getOption(self, name: str) -> Optional[str]:
        return self._opts.get(name)

    def positionals(self) -> list[str]:
        return list(self._args)

    def extras(self) -> list[str]:
        """Positionals that followed a bare "--"."""
        return list(self._extras)

    def flags(self) -> set[str]:
        return set(self._flags)

    def options(self) -> dict[str, str]:
        return dict(self._opts)

    def getAs(self, name: str, typ: type[T], default: Optional[T] = None) -> Optional[T]:
        """
        Returns the option `name` converted to `typ`.

        Args:
            name: The option name.
            typ: The requested type, dispatched through `extract.cast`.
            default: Returned when `name` was not supplied.

        Returns:
            The converted value. A bare flag reads as True when `typ` is bool.

        Raises:
            ValueError: If the value cannot be converted.
            TypeError: If no converter exists for `typ`.
        """
        value = self._opts.get(name)
        if value is None:
            if typ is bool and name in self._flags:
                return extract.cast("true", typ)
            return default

        try:
            return extract.cast(value, typ)
        except ValueError as e:
            raise ValueError(f"Invalid value for '{name}': {e}") from e

    def getList(self, name: str, typ: type[T]) -> list[T]:
        """Returns the comma separated option `name` as a list of `typ`."""
        value = self._opts.get(name)
        if value is None:
            return []

        try:
            return extract.castList(value, typ)
        except ValueError as e:
            raise ValueError(f"Invalid value for '{name}': {e}") from e

    def find(self, argDef: ArgDef) -> Optional[FlagArg | OptionArg]:
        """
        Returns the first flag or option matching `argDef`.

        Unlike `getOption`, which keeps the last value of a repeated option,
        this returns the earliest occurrence; use `findAll` to see every one.
        """
        for arg in self._arguments:
            if isinstance(arg, (FlagArg, OptionArg)) and argDef.matches(arg.name):
                return arg
        return None

    def findAll(self, kind: type[A], argDef: Optional[ArgDef] = None) -> list[A]:
        """Returns every argument of class `kind`, in input order."""
        res: list[A] = []
        for arg in self._arguments:
            if not isinstance(arg, kind):
                continue
            if argDef is not None and not (
                isinstance(arg, (FlagArg, OptionArg)) and argDef.matches(arg.name)
            ):
                continue
            res.append(arg)
        return res
