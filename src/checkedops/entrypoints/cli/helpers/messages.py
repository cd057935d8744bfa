"""Terminal message helpers for the CHECKEDOPS CLI.

Small helpers for rendering user-visible lines with sensible emoji→ASCII fallbacks.
Messages write to stderr so stdout only ever carries operation results.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    Decides whether to emit emojis or fall back to ASCII so terminals
    without UTF-8 don't raise `UnicodeEncodeError`.

    Args:
        character: A single Unicode character to check (e.g., "❌").

    Returns:
        bool: True if encoding succeeds; False on `UnicodeEncodeError`.
    """

    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def error_glyph() -> str:
    """Error marker with graceful fallbacks.

    Returns:
        str: "❌" or "[X]" depending on stream support.
    """
    emoji, fallback = ("❌", "[X]")  # pragma: no mutate
    if _supports_character(emoji):
        return emoji
    return fallback


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr** with an error glyph.

    Args:
        msg: The message to display.

    Example:
        ``❌  DivideByZero: Division by zero is not allowed.``
    """
    g = error_glyph()
    click.secho(f"{g}  {msg}", fg="red", bold=True, err=True)
