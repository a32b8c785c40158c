"""Status lines for the QUITANDA CLI.

Each helper writes one styled line to stderr, prefixed with an emoji glyph or
its ASCII fallback when stderr cannot encode the emoji. Stdout stays free for
Alembic and other machine-readable output.
"""

import click

WARN_GLYPHS = ("⚠️", "[!]")
SUCCESS_GLYPHS = ("✅", "[OK]")
ERROR_GLYPHS = ("❌", "[X]")


def _stderr_can_encode(text: str) -> bool:
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        text.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(choices: tuple[str, str]) -> str:
    """Return the emoji of an ``(emoji, fallback)`` pair when stderr supports it."""
    emoji, fallback = choices
    return emoji if _stderr_can_encode(emoji) else fallback


def warn(msg: str) -> None:
    """Print a bold yellow warning, e.g. ``⚠️  This will modify your database.``"""
    click.secho(f"{glyph(WARN_GLYPHS)}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Print a bold green success line, e.g. ``✅  Upgrade complete!``"""
    click.secho(f"{glyph(SUCCESS_GLYPHS)}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Print a bold red error line, e.g. ``❌  Cannot connect to database``"""
    click.secho(f"{glyph(ERROR_GLYPHS)}  {msg}", fg="red", bold=True, err=True)
