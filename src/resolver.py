"""
Resolves the playable video sources of an episode.

The episode page embeds an entity-escaped URL of a player page, and the
player page assigns the list of sources to a script variable. Resolution
walks through these stages in order and stops at the first failure:

    FETCHING_EPISODE_PAGE -> EXTRACTING_PLAYER_URL -> FETCHING_PLAYER_PAGE
          -> EXTRACTING_SOURCE_ARRAY -> ASSEMBLED

Any stage may end in FAILED. Every upstream call is attempted exactly once.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from src.codec import decode_entities
from src.errors import (
    BlockNotFound,
    EmptyExtraction,
    MalformedArray,
    MarkerNotFound,
    ResolverError,
    UnterminatedMarker,
    UpstreamUnavailable,
)
from src.extractors import ArrayCarver, MarkerPair, carve_until_terminator, extract_embedded_array, extract_marked_value
from src.models import EpisodeRequest, RawDocument, VideoSource
from src.parser import parse_source_list
from src.utils import log


class Fetcher(Protocol):
    def fetch(self, url: str) -> RawDocument: ...


class ResolverState(Enum):
    FETCHING_EPISODE_PAGE = "fetching_episode_page"
    EXTRACTING_PLAYER_URL = "extracting_player_url"
    FETCHING_PLAYER_PAGE = "fetching_player_page"
    EXTRACTING_SOURCE_ARRAY = "extracting_source_array"
    ASSEMBLED = "assembled"
    FAILED = "failed"


class FailureReason(Enum):
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    PLAYER_URL_NOT_FOUND = "player_url_not_found"
    NO_PLAYABLE_SOURCES = "no_playable_sources"


@dataclass
class Resolution:
    """The single outcome of resolving an episode."""

    request: EpisodeRequest
    state: ResolverState
    sources: list[VideoSource] = field(default_factory=list)
    reason: FailureReason | None = None
    # Internal cause, e.g. 'BlockNotFound' or 'MalformedArray'
    detail: str | None = None
    failed_in: ResolverState | None = None

    @property
    def ok(self) -> bool:
        return self.state is ResolverState.ASSEMBLED


class EpisodeResolver:
    """Drives the fetch and extraction stages for one site."""

    def __init__(
        self,
        fetcher: Fetcher,
        episode_url: Callable[[EpisodeRequest], str],
        player_url_markers: Sequence[MarkerPair],
        sources_block: str,
        carve: ArrayCarver = carve_until_terminator,
    ):
        self.fetcher = fetcher
        self.episode_url = episode_url
        self.player_url_markers = player_url_markers
        self.sources_block = sources_block
        self.carve = carve

    def resolve(self, request: EpisodeRequest) -> Resolution:
        """
        Resolves the video sources of an episode.

        Args:
            request: The title slug and episode number.

        Returns:
            A Resolution in the ASSEMBLED state with at least one source, or
            in the FAILED state with the reason. Partial results are never
            returned.
        """
        state = ResolverState.FETCHING_EPISODE_PAGE
        episode_url = self.episode_url(request)
        log(f"📄 Fetching episode page: {episode_url}", indent=1)
        try:
            episode_page = self.fetcher.fetch(episode_url)
        except UpstreamUnavailable as e:
            return self._fail(request, state, FailureReason.UPSTREAM_UNAVAILABLE, e)

        state = ResolverState.EXTRACTING_PLAYER_URL
        try:
            encoded_url = extract_marked_value(episode_page.body, self.player_url_markers)
        except (MarkerNotFound, UnterminatedMarker, EmptyExtraction) as e:
            return self._fail(request, state, FailureReason.PLAYER_URL_NOT_FOUND, e)
        player_url = decode_entities(encoded_url)
        log(f"🔗 Player URL: {player_url}", indent=2)

        state = ResolverState.FETCHING_PLAYER_PAGE
        try:
            player_page = self.fetcher.fetch(player_url)
        except UpstreamUnavailable as e:
            return self._fail(request, state, FailureReason.UPSTREAM_UNAVAILABLE, e)

        state = ResolverState.EXTRACTING_SOURCE_ARRAY
        try:
            array_text = extract_embedded_array(player_page.body, self.sources_block, self.carve)
            sources = parse_source_list(array_text)
        except (BlockNotFound, MalformedArray) as e:
            return self._fail(request, state, FailureReason.NO_PLAYABLE_SOURCES, e)

        if not sources:
            return self._fail(request, state, FailureReason.NO_PLAYABLE_SOURCES, detail="EmptySourceList")

        log(f"✅ Found {len(sources)} video source(s)", indent=1)
        return Resolution(request=request, state=ResolverState.ASSEMBLED, sources=sources)

    def _fail(
        self,
        request: EpisodeRequest,
        state: ResolverState,
        reason: FailureReason,
        error: ResolverError | None = None,
        detail: str | None = None,
    ) -> Resolution:
        detail = detail or type(error).__name__
        message = f": {error}" if error else ""
        log(f"❌ [{state.value}] {reason.value} ({detail}){message}", indent=1)
        return Resolution(
            request=request,
            state=ResolverState.FAILED,
            reason=reason,
            detail=detail,
            failed_in=state,
        )
