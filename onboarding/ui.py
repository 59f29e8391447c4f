"""Shared prompt styling and helpers for the terminal wizard."""

import questionary
from questionary import Style

STYLE = Style(
    [
        ("qmark", "fg:magenta bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:magenta bold"),
        ("highlighted", "fg:magenta bold"),
        ("selected", "fg:green"),
        ("instruction", "fg:gray italic"),
    ]
)


async def ask_until_nonempty(
    prompt: str, is_password: bool = False, default: str = ""
) -> str | None:
    """Prompt until non-empty input. Returns None if the user cancelled."""
    while True:
        if is_password:
            val = await questionary.password(prompt, style=STYLE).ask_async()
        else:
            val = await questionary.text(prompt, default=default, style=STYLE).ask_async()
        if val is None:
            return None
        if val.strip():
            return val.strip()
        print("This field cannot be empty. Try again.\n")


async def ask_retry(message: str) -> bool:
    """Show a failure and ask whether to try the step again. False on quit or cancel."""
    print(f"\n  ✗ {message}\n")
    retry = await questionary.confirm("Try again?", default=True, style=STYLE).ask_async()
    return bool(retry)
