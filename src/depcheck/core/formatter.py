"""Render dependency structures as listing text, DOT or Mermaid."""

from __future__ import annotations

from collections.abc import Mapping, Sequence


def format_listing(library: str, dependencies: Sequence[str]) -> str:
    """Render one line: "<library> depends on <dep> <dep> ..."."""
    return f"{library} depends on {' '.join(dependencies)}"


def format_structure(structure: Mapping[str, Sequence[str]]) -> str:
    """Render one listing per library, in the structure's key order, no trailing newline."""
    return "\n".join(format_listing(library, deps) for library, deps in structure.items())


def _edges(structure: Mapping[str, Sequence[str]]) -> list[tuple[str, str]]:
    return sorted({(library, dep) for library, deps in structure.items() for dep in deps})


def node_names(structure: Mapping[str, Sequence[str]]) -> list[str]:
    """Every name in the structure: defined libraries first, then leaves, each once."""
    names = dict.fromkeys(structure)
    for deps in structure.values():
        names.update(dict.fromkeys(deps))
    return list(names)


def to_dot(
    structure: Mapping[str, Sequence[str]],
    title: str | None = None,
    highlight_libraries: bool = True,
) -> str:
    """
    Generate a Graphviz digraph with one edge per library -> dependency.

    Names are quoted, so they serve as node IDs directly. Libraries that have
    their own listing are filled; leaves keep the plain box style.
    """
    attributes = ["rankdir=LR;"]
    if title:
        attributes += [f'label="{title}";', "labelloc=t;"]
    attributes.append('node [shape=box, style=rounded, fontname="sans-serif"];')

    body = []
    if highlight_libraries:
        body += [f'"{name}" [style="rounded,filled", fillcolor=lightblue];' for name in structure]
    body += [f'"{parent}" -> "{child}";' for parent, child in _edges(structure)]

    return "\n".join(["digraph dependencies {", *(f"    {line}" for line in attributes + body), "}"])


def mermaid_ids(structure: Mapping[str, Sequence[str]]) -> dict[str, str]:
    """
    Map each name to a Mermaid node ID ("n0", "n1", ...).

    Library names may hold characters Mermaid IDs cannot ($ @ -), and any
    substitution scheme would merge names such as "a-b" and "a_b"; numbering
    keeps them apart. The real name is carried in the node label.
    """
    return {name: f"n{index}" for index, name in enumerate(node_names(structure))}


def to_mermaid(
    structure: Mapping[str, Sequence[str]],
    title: str | None = None,
    highlight_libraries: bool = True,
) -> str:
    """Generate a Mermaid flowchart with one edge per library -> dependency."""
    ids = mermaid_ids(structure)
    header = f"---\ntitle: {title}\n---\ngraph LR" if title else "graph LR"

    body = [f'{node_id}["{name}"]' for name, node_id in ids.items()]
    if highlight_libraries:
        body += [f"style {ids[name]} fill:#lightblue" for name in structure]
    body += [f"{ids[parent]} --> {ids[child]}" for parent, child in _edges(structure)]

    return "\n".join([header, *(f"    {line}" for line in body)])
