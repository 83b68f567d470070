"""
Participant name handling.

Turns the raw participants upload into display names and
certificate file names.
"""

import logging

from .exceptions import InvalidParticipantError

logger = logging.getLogger(__name__)

# Characters that would let a name escape the certificates directory
_PATH_SEPARATORS = ("/", "\\", "\x00")


def normalize_name(raw: str) -> str:
    """
    Normalize a participant name for display.

    Trims the name, collapses runs of whitespace, and uppercases the first
    character of every word. The rest of each word is left untouched, so
    "mcDonald" becomes "McDonald" rather than "Mcdonald".

    Args:
        raw: Name as it appears in the participants file

    Returns:
        str: Display name (empty string for blank input)
    """
    return " ".join(word[:1].upper() + word[1:] for word in raw.split())


def parse_participants(text: str) -> list[str]:
    """
    Split participants file content into normalized display names.

    One name per line. Blank lines are dropped, order is preserved and
    duplicates are kept (they collapse later, on disk).

    Args:
        text: Decoded content of the participants file

    Returns:
        list[str]: Display names in file order
    """
    names = [normalize_name(line) for line in text.splitlines()]
    names = [name for name in names if name]
    logger.info(f"Parsed {len(names)} participant name(s)")
    return names


def decode_participants(content: bytes) -> list[str]:
    """Decode an uploaded participants file (UTF-8, optional BOM) into names."""
    return parse_participants(content.decode("utf-8-sig", errors="replace"))


def certificate_filename(name: str) -> str:
    """
    Build the PNG file name for a display name.

    Path separators are replaced with underscores, so "A/B" and "A_B"
    map to the same file.

    Raises:
        InvalidParticipantError: If the name cannot form a file name
    """
    safe = name
    for separator in _PATH_SEPARATORS:
        safe = safe.replace(separator, "_")

    if not safe or safe in (".", ".."):
        raise InvalidParticipantError(f"Invalid participant name: {name!r}")

    return f"{safe}.png"
