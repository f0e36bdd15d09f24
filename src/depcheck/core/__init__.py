"""Core library: listing extraction, structure building, closure expansion, formatting."""

from depcheck.core.errors import (
    DependencyCheckError,
    DuplicateLibraryError,
    EmptyInputError,
    NoValidListingsError,
    SelfDependencyError,
)
from depcheck.core.formatter import format_listing, format_structure, to_dot, to_mermaid
from depcheck.core.graph import (
    DependencyStructure,
    build_structure,
    expand_library,
    expand_structure,
)
from depcheck.core.parser import Listing, extract_listings, normalize_line, parse_listing

__all__ = [
    "DependencyCheckError",
    "DuplicateLibraryError",
    "EmptyInputError",
    "NoValidListingsError",
    "SelfDependencyError",
    "format_listing",
    "format_structure",
    "to_dot",
    "to_mermaid",
    "DependencyStructure",
    "build_structure",
    "expand_library",
    "expand_structure",
    "Listing",
    "extract_listings",
    "normalize_line",
    "parse_listing",
]
