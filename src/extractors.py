"""
Marker based extraction of values embedded in raw page text.

The site does not expose an API and embeds its data in inline scripts, so
values are located by literal markers instead of by parsing the markup.
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from src.constants import VIDEO_SOURCES_TERMINATOR
from src.errors import BlockNotFound, EmptyExtraction, MarkerNotFound, UnterminatedMarker

# A matcher returns the value it found, or None if its start marker is absent
Matcher = Callable[[str], str | None]

# Turns the text that follows an array prefix into closed array text
ArrayCarver = Callable[[str], str]


@dataclass(frozen=True)
class MarkerPair:
    """A literal start/end delimiter pair around an embedded value."""

    start: str
    end: str


def marker_pairs(pairs: Iterable[tuple[str, str]]) -> list[MarkerPair]:
    """Builds marker pairs from (start, end) tuples."""
    return [MarkerPair(start, end) for start, end in pairs]


def marker_matcher(pair: MarkerPair) -> Matcher:
    """
    Creates a matcher for a single marker pair.

    The end marker is only searched after the start marker, so an earlier
    unrelated occurrence of the end marker is never matched.

    Raises:
        UnterminatedMarker: From the returned matcher, if the start marker is
            found but the end marker does not follow it.
    """

    def match(text: str) -> str | None:
        start_index = text.find(pair.start)
        if start_index == -1:
            return None

        value_start = start_index + len(pair.start)
        value_end = text.find(pair.end, value_start)
        if value_end == -1:
            raise UnterminatedMarker(
                f"End marker {pair.end!r} not found after {pair.start!r}",
                details={"position": value_start},
            )
        return text[value_start:value_end]

    return match


def extract_with_matchers(text: str, matchers: Sequence[Matcher]) -> str:
    """
    Runs the matchers in order and returns the value of the first one that matches.

    Later matchers are only tried when every earlier one found no start marker.

    Args:
        text: The document text.
        matchers: Matchers ordered by priority.

    Returns:
        The extracted, non-empty value.

    Raises:
        MarkerNotFound: If no matcher finds its start marker.
        UnterminatedMarker: If the first matching start marker is never closed.
        EmptyExtraction: If the first matching region is empty.
    """
    for matcher in matchers:
        value = matcher(text)
        if value is None:
            continue
        if not value:
            raise EmptyExtraction("Nothing found between the markers")
        return value

    raise MarkerNotFound(f"None of {len(matchers)} marker variants found in the text")


def extract_marked_value(text: str, pairs: Sequence[MarkerPair]) -> str:
    """Extracts the value between the first marker pair found in the text."""
    return extract_with_matchers(text, [marker_matcher(pair) for pair in pairs])


def carve_until_terminator(tail: str, terminator: str = VIDEO_SOURCES_TERMINATOR) -> str:
    """
    Cuts the array text at the first terminator and closes it again.

    This is a heuristic boundary, not a grammar: it assumes the terminator
    never occurs inside a string value of the array. That holds for the
    documents the site serves today but is not guaranteed.
    """
    return tail.split(terminator, 1)[0] + "]"


def extract_embedded_array(text: str, prefix: str, carve: ArrayCarver = carve_until_terminator) -> str:
    """
    Carves the source text of an array literal assigned in an inline script.

    The last occurrence of the prefix is used, since the page may repeat the
    literal earlier as inert text.

    Args:
        text: The document text.
        prefix: The literal that precedes the array, e.g. 'var video_sources = '.
        carve: Strategy that cuts the array out of the text following the prefix.

    Returns:
        The closed array text.

    Raises:
        BlockNotFound: If the prefix does not occur in the text.
    """
    block_index = text.rfind(prefix)
    if block_index == -1:
        raise BlockNotFound(f"Array prefix {prefix!r} not found in the document")

    return carve(text[block_index + len(prefix) :])
