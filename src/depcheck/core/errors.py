"""Errors raised while checking a dependency listing document."""

from __future__ import annotations


class DependencyCheckError(ValueError):
    """Base class for every error the dependency pipeline raises."""

    message = "Invalid dependency data."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class NoValidListingsError(DependencyCheckError):
    """No line of the input matches the listing grammar."""

    message = "Invalid input: Please check the dependency list formatting."


class EmptyInputError(NoValidListingsError):
    """The input never mentions " depends on " at all."""

    message = "Invalid input: No dependencies listed."


class DuplicateLibraryError(DependencyCheckError):
    """The same library is defined by more than one listing."""

    message = "Invalid dependency data: There is a duplicate library dependency listing."

    def __init__(self, library: str, message: str | None = None) -> None:
        super().__init__(message)
        self.library = library


class SelfDependencyError(DependencyCheckError):
    """A listing names its own library among its direct dependencies."""

    message = "Invalid dependency data: A library directly depends on itself."

    def __init__(self, library: str, message: str | None = None) -> None:
        super().__init__(message)
        self.library = library
