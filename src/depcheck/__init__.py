"""depcheck: expand library dependency listings to full dependency lists (library, TUI, CLI)."""

from importlib.metadata import version, PackageNotFoundError

from depcheck.api import (
    CheckResult,
    process,
    process_file,
    SAMPLE_INPUT,
)
from depcheck.core.errors import (
    DependencyCheckError,
    DuplicateLibraryError,
    EmptyInputError,
    NoValidListingsError,
    SelfDependencyError,
)

__all__ = [
    "CheckResult",
    "process",
    "process_file",
    "SAMPLE_INPUT",
    "DependencyCheckError",
    "DuplicateLibraryError",
    "EmptyInputError",
    "NoValidListingsError",
    "SelfDependencyError",
    "__version__",
]

try:
    __version__ = version("depcheck")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed as package
