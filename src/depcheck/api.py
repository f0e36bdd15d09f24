"""Public API: use depcheck from Python or from other tools."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from depcheck.core.formatter import format_structure
from depcheck.core.graph import DependencyStructure, build_structure, expand_structure
from depcheck.core.parser import extract_listings

logger = logging.getLogger(__name__)

# Shown by the TUI and served by the web backend as an example document.
SAMPLE_INPUT = """\
A depends on B C
B depends on C E
C depends on G
D depends on A F
E depends on F
F depends on H"""


@dataclass
class CheckResult:
    """What was read from a document and the expanded listings computed from it."""

    normalized_input: str
    expanded_output: str
    dependencies: DependencyStructure = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dict (for CLI/API output)."""
        return {
            "input": self.normalized_input,
            "output": self.expanded_output,
            "dependencies": {name: list(deps) for name, deps in self.dependencies.items()},
        }


def process(text: str) -> CheckResult:
    """
    Check a dependency listing document and compute every library's full dependency list.

    Args:
        text: Raw document text; one "<lib> depends on <dep> ..." per line.

    Returns:
        CheckResult with the normalized listings that were understood and
        the expanded listings, both as newline-joined text.

    Raises:
        DependencyCheckError: (a subclass of) if the document is invalid.
    """
    listings = extract_listings(text)
    structure = expand_structure(build_structure(listings))
    return CheckResult(
        normalized_input="\n".join(listing.line for listing in listings),
        expanded_output=format_structure(structure),
        dependencies=structure,
    )


def process_file(path: Path | str, *, encoding: str = "utf-8") -> CheckResult:
    """
    Read a text file and check it like `process`.

    OSError and UnicodeDecodeError from reading propagate unchanged.
    """
    path = Path(path)
    logger.debug("Reading %s", path)
    return process(path.read_text(encoding=encoding))
