"""Tests for dependency listing extraction."""

import pytest

from depcheck.core.errors import (
    DependencyCheckError,
    EmptyInputError,
    NoValidListingsError,
)
from depcheck.core.parser import (
    Listing,
    extract_listings,
    is_identifier,
    is_listing_line,
    normalize_line,
    parse_listing,
)


class TestIsIdentifier:
    """Tests for is_identifier helper."""

    def test_letters_and_digits(self) -> None:
        assert is_identifier("A") is True
        assert is_identifier("lib2") is True
        assert is_identifier("Space") is True

    def test_allowed_leading_symbols(self) -> None:
        assert is_identifier("_private") is True
        assert is_identifier("$jquery") is True
        assert is_identifier("@scope") is True

    def test_allowed_inner_symbols(self) -> None:
        assert is_identifier("left-pad") is True
        assert is_identifier("a@b$c_d-e") is True

    def test_leading_digit_or_dash(self) -> None:
        assert is_identifier("3rdparty") is False
        assert is_identifier("-flag") is False

    def test_disallowed_characters(self) -> None:
        assert is_identifier("a.b") is False
        assert is_identifier("a/b") is False
        assert is_identifier("") is False


class TestNormalizeLine:
    """Tests for normalize_line helper."""

    def test_collapses_inner_whitespace(self) -> None:
        assert normalize_line("A depends on B  C") == "A depends on B C"

    def test_trims_ends(self) -> None:
        assert normalize_line("  Space  depends  on  Time  ") == "Space depends on Time"

    def test_tabs_are_whitespace(self) -> None:
        assert normalize_line("A\tdepends on\t\tB") == "A depends on B"

    def test_blank(self) -> None:
        assert normalize_line("   ") == ""


class TestIsListingLine:
    """Tests for the full-line grammar."""

    def test_valid(self) -> None:
        assert is_listing_line("X depends on Y") is True
        assert is_listing_line("X depends on Y R Z") is True

    def test_missing_dependencies(self) -> None:
        assert is_listing_line("X depends on") is False
        assert is_listing_line("X depends") is False

    def test_two_leading_tokens(self) -> None:
        assert is_listing_line("X X depends on X") is False
        assert is_listing_line("Y and Z depends on A") is False

    def test_invalid_dependency_token(self) -> None:
        assert is_listing_line("X depends on Y 1z") is False
        assert is_listing_line("X depends on Y.z") is False

    def test_not_normalized(self) -> None:
        assert is_listing_line("X depends on Y  Z") is False
        assert is_listing_line(" X depends on Y") is False


class TestListing:
    """Tests for Listing dataclass."""

    def test_deduplicates_dependencies(self) -> None:
        listing = Listing(library="A", dependencies=("B", "C", "B", "D", "C"), line="")
        assert listing.dependencies == ("B", "C", "D")

    def test_frozen(self) -> None:
        listing = Listing(library="A", dependencies=("B",), line="A depends on B")
        with pytest.raises(AttributeError):
            listing.library = "Z"  # type: ignore[misc]


class TestParseListing:
    """Tests for parse_listing."""

    def test_basic(self) -> None:
        listing = parse_listing("X depends on Y R")
        assert listing.library == "X"
        assert listing.dependencies == ("Y", "R")
        assert listing.line == "X depends on Y R"

    def test_normalizes_first(self) -> None:
        listing = parse_listing("  X   depends on   Y  ")
        assert listing.line == "X depends on Y"
        assert listing.dependencies == ("Y",)

    def test_keeps_duplicates_in_line(self) -> None:
        listing = parse_listing("A depends on B B C")
        assert listing.dependencies == ("B", "C")
        assert listing.line == "A depends on B B C"

    def test_keyword_words_as_dependencies(self) -> None:
        listing = parse_listing("A depends on depends on B")
        assert listing.dependencies == ("depends", "on", "B")

    def test_invalid(self) -> None:
        with pytest.raises(ValueError):
            parse_listing("hello world")


class TestExtractListings:
    """Tests for extract_listings."""

    def test_basic(self) -> None:
        listings = extract_listings("X depends on Y R\nY depends on Z")
        assert [item.library for item in listings] == ["X", "Y"]
        assert listings[0].dependencies == ("Y", "R")

    def test_crlf_line_endings(self) -> None:
        listings = extract_listings("X depends on Y\r\nY depends on Z\r\n")
        assert [item.line for item in listings] == ["X depends on Y", "Y depends on Z"]

    def test_ignores_unrelated_lines(self) -> None:
        text = "\ntesting 123\nX depends on Y\nX depends\nX X depends on X\nX\n"
        listings = extract_listings(text)
        assert [item.line for item in listings] == ["X depends on Y"]

    def test_irregular_spacing(self) -> None:
        listings = extract_listings("A depends on B  C\nB  depends on W")
        assert [item.line for item in listings] == ["A depends on B C", "B depends on W"]

    def test_no_keyword(self) -> None:
        with pytest.raises(EmptyInputError) as exc_info:
            extract_listings("X\n\n depends\nX\non\n")
        assert str(exc_info.value) == "Invalid input: No dependencies listed."

    def test_no_keyword_is_also_no_valid_listings(self) -> None:
        with pytest.raises(NoValidListingsError):
            extract_listings("hello\nworld")

    def test_keyword_without_dependencies(self) -> None:
        with pytest.raises(NoValidListingsError) as exc_info:
            extract_listings("X depends on  ")
        assert not isinstance(exc_info.value, EmptyInputError)
        assert str(exc_info.value) == "Invalid input: Please check the dependency list formatting."

    def test_only_keywords(self) -> None:
        text = (
            "depends on depends on depends\n"
            "depends\n"
            "on\n"
            " depends on \n"
            "depends on depends \n"
            "on depends on "
        )
        with pytest.raises(NoValidListingsError):
            extract_listings(text)

    def test_invalid_definitions(self) -> None:
        text = "X X depends on Y\nY and Z depends on A\ndepends on A depends on B \n "
        with pytest.raises(NoValidListingsError):
            extract_listings(text)

    def test_errors_share_base_class(self) -> None:
        with pytest.raises(DependencyCheckError):
            extract_listings("nothing here")
        with pytest.raises(ValueError):
            extract_listings("nothing here")
