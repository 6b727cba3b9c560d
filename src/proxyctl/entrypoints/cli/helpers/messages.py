"""Terminal message helpers for the PROXYCTL CLI.

User-visible status lines go to **stderr** with an emoji glyph, falling back
to ASCII when the stream's encoding cannot represent the emoji. stdout is
left for anything a caller may want to pipe.
"""

import click

SUCCESS_GLYPHS = ("✅", "[OK]")
ERROR_GLYPHS = ("❌", "[X]")


def glyph(emoji: str, fallback: str) -> str:
    """Return ``emoji`` if stderr can encode it, else ``fallback``.

    Args:
        emoji: Preferred marker, e.g. "✅".
        fallback: ASCII marker used on terminals without UTF-8, e.g. "[OK]".
    """
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        emoji.encode(encoding)
    except UnicodeEncodeError:
        return fallback
    return emoji


def _emit(msg: str, glyphs: tuple[str, str], color: str) -> None:
    click.secho(f"{glyph(*glyphs)}  {msg}", fg=color, bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green success line, e.g. ``✅  Enabled log priority 'info'.``"""
    _emit(msg, SUCCESS_GLYPHS, "green")


def error(msg: str) -> None:
    """Emit a red error line, e.g. ``❌  Cannot reach 127.0.0.1:8989.``"""
    _emit(msg, ERROR_GLYPHS, "red")
