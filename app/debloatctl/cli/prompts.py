"""Operator prompts.

Thin wrappers over typer's prompt helpers so menu code and tests share
one input path.
"""

import typer


def ask(prompt: str, default: str = "") -> str:
    """Prompt for free text.

    Args:
        prompt: Prompt text.
        default: Value used when the operator just presses Enter.

    Returns:
        The stripped answer (may be empty).
    """
    answer: str = typer.prompt(prompt, default=default, show_default=bool(default))
    return answer.strip()


def ask_choice(prompt: str = "Enter choice") -> int | None:
    """Prompt for a menu number.

    Returns:
        The number entered, or None if the input was not a number.
    """
    raw = ask(prompt)
    try:
        return int(raw)
    except ValueError:
        return None


def confirm(prompt: str) -> bool:
    """Ask a yes/no question, defaulting to no."""
    return typer.confirm(prompt, default=False)
