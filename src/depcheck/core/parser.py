"""Extract dependency listings ("X depends on Y Z") from raw text."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from depcheck.core.errors import EmptyInputError, NoValidListingsError

logger = logging.getLogger(__name__)

# Substring every document must contain before any line is considered.
KEYWORD = " depends on "

# A library name: starts with a letter or one of _ $ @, then letters, digits, @ $ _ -.
IDENTIFIER_PATTERN = r"[A-Za-z_$@][A-Za-z0-9@$_-]*"

_IDENTIFIER_RE = re.compile(IDENTIFIER_PATTERN)
_LISTING_RE = re.compile(
    rf"{IDENTIFIER_PATTERN} depends on {IDENTIFIER_PATTERN}(?: {IDENTIFIER_PATTERN})*"
)
_LINE_SPLIT_RE = re.compile(r"\r?\n")
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class Listing:
    """One validated input line: a library and its direct dependencies."""

    library: str
    dependencies: tuple[str, ...]  # deduplicated, first occurrence wins
    line: str  # normalized text exactly as interpreted

    def __post_init__(self) -> None:
        object.__setattr__(self, "dependencies", tuple(dict.fromkeys(self.dependencies)))


def normalize_line(line: str) -> str:
    """Collapse runs of whitespace to single spaces and trim both ends."""
    return _WHITESPACE_RE.sub(" ", line).strip()


def is_identifier(token: str) -> bool:
    """True if token is a valid library name."""
    return _IDENTIFIER_RE.fullmatch(token) is not None


def is_listing_line(line: str) -> bool:
    """True if an already-normalized line is a dependency listing."""
    return _LISTING_RE.fullmatch(line) is not None


def parse_listing(line: str) -> Listing:
    """
    Parse one line into a Listing.

    The line is normalized first. Raises ValueError if it does not match
    the listing grammar.
    """
    normalized = normalize_line(line)
    if not is_listing_line(normalized):
        raise ValueError(f"Not a dependency listing: {line!r}")
    words = normalized.split(" ")
    # words[1:3] are the literal "depends on"
    return Listing(library=words[0], dependencies=tuple(words[3:]), line=normalized)


def extract_listings(text: str) -> list[Listing]:
    """
    Return the dependency listings found in text, in input order.

    Lines that do not match the grammar after normalization (blank lines,
    commentary, malformed declarations) are skipped.

    Raises:
        EmptyInputError: text never contains " depends on ".
        NoValidListingsError: no line matches the grammar.
    """
    if KEYWORD not in text:
        raise EmptyInputError()

    listings: list[Listing] = []
    skipped = 0
    for raw_line in _LINE_SPLIT_RE.split(text):
        line = normalize_line(raw_line)
        if not is_listing_line(line):
            skipped += 1
            continue
        listings.append(parse_listing(line))

    logger.debug("Extracted %d listing(s), skipped %d line(s)", len(listings), skipped)
    if not listings:
        raise NoValidListingsError()
    return listings
