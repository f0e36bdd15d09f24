"""Build the direct-dependency structure and expand it to full closures."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from depcheck.core.errors import DuplicateLibraryError, SelfDependencyError
from depcheck.core.parser import Listing

logger = logging.getLogger(__name__)

# library name -> ordered dependency names; key order is definition order
DependencyStructure = dict[str, list[str]]


def build_structure(listings: Iterable[Listing]) -> DependencyStructure:
    """
    Map each listing's library to its direct dependencies, in listing order.

    Raises:
        DuplicateLibraryError: a library is defined by more than one listing.
        SelfDependencyError: a listing names its own library as a dependency.
    """
    listings = list(listings)
    seen: set[str] = set()
    for listing in listings:
        if listing.library in seen:
            raise DuplicateLibraryError(listing.library)
        seen.add(listing.library)

    structure: DependencyStructure = {}
    for listing in listings:
        if listing.library in listing.dependencies:
            raise SelfDependencyError(listing.library)
        structure[listing.library] = list(listing.dependencies)

    logger.debug("Built structure with %d library definition(s)", len(structure))
    return structure


def expand_library(direct: Mapping[str, Sequence[str]], library: str) -> list[str]:
    """
    Return the full dependency sequence of one library.

    The result starts with the library's direct dependencies. Each dependency
    that is itself defined contributes its direct dependencies not yet in the
    result, walked depth first, left to right, before the walk moves on.
    A dependency equal to `library` is skipped; that is the only cycle check.
    Names never defined in `direct` are leaves.
    """
    deps = direct[library]
    result = list(deps)
    seen = set(result)
    # Each entry is the remaining part of a sequence being walked.
    stack = [iter(deps)]
    while stack:
        dep = next(stack[-1], None)
        if dep is None:
            stack.pop()
            continue
        if dep == library:
            continue
        if dep not in seen:
            result.append(dep)
            seen.add(dep)
        if dep in direct:
            pending = [d for d in direct[dep] if d not in seen]
            if pending:
                stack.append(iter(pending))
    return result


def expand_structure(structure: DependencyStructure) -> DependencyStructure:
    """
    Replace every library's direct dependencies with its full closure.

    Closures are computed against a snapshot of the direct edges, so the
    order of libraries in the structure does not influence any result.
    Updates `structure` in place and returns it.
    """
    direct = {library: tuple(deps) for library, deps in structure.items()}
    expanded = {library: expand_library(direct, library) for library in direct}
    for library, deps in expanded.items():
        logger.debug("%s: %d direct, %d total", library, len(direct[library]), len(deps))
    structure.update(expanded)
    return structure
