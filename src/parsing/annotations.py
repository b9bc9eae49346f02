"""Citation footer parsing for chat replies.

A reply may end with a line of the form ``Sources: Label A (url), Label B``.
Parsing happens in two phases: isolate the footer, then split its labels.
The marker search is purely textual, so a reply whose last line mentions
``Sources: `` is split there too.
"""

import re

from src.models.schemas import ParsedReply

# Anchored at the very end of the reply; `.` does not cross newlines.
SOURCES_MARKER = re.compile(r"Sources: (.*)\Z")
SOURCE_SEPARATOR = ", "
CITATION_URL = re.compile(r"\((.*?)\)")


def split_marker(raw: str) -> tuple[str, str | None]:
    """Split a raw reply at its citation marker.

    Args:
        raw: Reply text as returned by the chat service.

    Returns:
        Tuple of (content, footer). Without a marker the content is the
        untouched reply and the footer is None.
    """
    match = SOURCES_MARKER.search(raw)
    if match is None:
        return raw, None
    return raw[: match.start()].strip(), match.group(1)


def split_sources(footer: str) -> list[str]:
    """Split a citation footer into trimmed labels."""
    if not footer.strip():
        return []
    return [label.strip() for label in footer.split(SOURCE_SEPARATOR)]


def parse_response(raw: str) -> ParsedReply:
    """Parse a raw reply into display text and ordered citation labels.

    Args:
        raw: Reply text as returned by the chat service.

    Returns:
        ParsedReply with the display content and its sources.
    """
    content, footer = split_marker(raw)
    if footer is None:
        return ParsedReply(content=content)
    return ParsedReply(content=content, sources=split_sources(footer))


def extract_citation_url(label: str) -> str | None:
    """Return the URL embedded in a citation label, if any.

    The first parenthesized group wins: ``"Doc A (http://a)"`` yields
    ``"http://a"`` while ``"Doc B"`` yields None.
    """
    match = CITATION_URL.search(label)
    return match.group(1) if match else None
