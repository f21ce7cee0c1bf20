from . import vt100
from .args import Args


def _section(name: str, lines: list[str]) -> list[str]:
    res = [vt100.subtitle(name)]
    if not lines:
        res.append(vt100.indent(f"{vt100.BRIGHT_BLACK}(none){vt100.RESET}"))
    else:
        res.extend(vt100.indent(line) for line in lines)
    res.append("")
    return res


def render(args: Args) -> str:
    """Renders how a command line was classified."""
    lines = [vt100.title("Arguments"), ""]

    lines += _section(
        "Flags", [f"{vt100.GREEN}{name}{vt100.RESET}" for name in sorted(args.flags())]
    )

    lines += _section(
        "Options",
        [
            f"{vt100.GREEN}{name}{vt100.RESET} = {value!r}"
            for name, value in sorted(args.options().items())
        ],
    )

    lines += _section(
        "Positionals",
        [f"{i}: {value!r}" for i, value in enumerate(args.positionals())],
    )

    if args.extras():
        lines += _section("Extras", [repr(value) for value in args.extras()])

    return "\n".join(lines)
