GREEN = "\033[32m"
WHITE = "\033[37m"

BRIGHT_BLACK = "\033[90m"

BOLD = "\033[1m"
UNDERLINE = "\033[4m"
RESET = "\033[0m"


def indent(text: str, indent: int = 4) -> str:
    return " " * indent + text.replace("\n", "\n" + " " * indent)


def title(text: str) -> str:
    return f"{BOLD+WHITE+UNDERLINE}{text}{RESET}"


def subtitle(text: str) -> str:
    return f"{BOLD+WHITE}{text}{RESET}:"
