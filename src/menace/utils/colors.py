"""
ANSI color helpers for terminal output.
"""

RESET = "\033[0m"

FG = {
    "green": "\033[92;1m",
    "yellow": "\033[93;1m",
    "gray": "\033[0;37m",
}


def colorize(text: str, color: str) -> str:
    """Wrap text in the named foreground color, then reset."""
    return f"{FG[color]}{text}{RESET}"
