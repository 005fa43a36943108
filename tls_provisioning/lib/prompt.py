"""Yes/no confirmation read from the terminal."""

from collections.abc import Callable

Confirm = Callable[[str], bool]


def ask_yes_no(question: str, input_func: Callable[[str], str] = input) -> bool:
    """Ask a yes/no question; only a bare 'y' or 'Y' counts as yes."""
    try:
        response = input_func(f"{question} (y/n): ")
    except EOFError:
        return False
    return response.strip() in ("y", "Y")


def always_yes(question: str) -> bool:
    """Confirmation that accepts everything (non-interactive runs)."""
    return True
