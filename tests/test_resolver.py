from src.constants import PLAYER_URL_MARKERS, VIDEO_SOURCES_BLOCK
from src.errors import UpstreamUnavailable
from src.extractors import marker_pairs
from src.models import EpisodeRequest, RawDocument, VideoSource
from src.resolver import EpisodeResolver, FailureReason, ResolverState

EPISODE_URL = "https://anime3rb.com/episode/one-piece/3"
PLAYER_URL = "https://player.example/x"

EPISODE_PAGE = r'<div x-data="{&quot;video_url&quot;:&quot;https:\/\/player.example\/x&quot;}"></div>'
PLAYER_PAGE = (
    '<script>var video_sources = [{"src":"https:\\/\\/cdn\\/a.mp4","label":"720p"}];'
    " var ads = [1]; jwplayer().setup();</script>"
)


class FakeFetcher:
    """Serves canned pages and records every URL it was asked for."""

    def __init__(self, pages: dict[str, str | int]):
        self.pages = pages
        self.requested: list[str] = []

    def fetch(self, url: str) -> RawDocument:
        self.requested.append(url)
        page = self.pages.get(url, 404)
        if isinstance(page, int):
            raise UpstreamUnavailable(f"HTTP {page} for {url}", url=url, status_code=page)
        return RawDocument(body=page, source_url=url)


def make_resolver(fetcher: FakeFetcher) -> EpisodeResolver:
    return EpisodeResolver(
        fetcher=fetcher,
        episode_url=lambda request: f"https://anime3rb.com/episode/{request.slug}/{request.episode}",
        player_url_markers=marker_pairs(PLAYER_URL_MARKERS),
        sources_block=VIDEO_SOURCES_BLOCK,
    )


REQUEST = EpisodeRequest(slug="one-piece", episode="3")


def test_resolve_success():
    """
    Tests the full path: escaped player URL, player page, embedded array.
    """
    fetcher = FakeFetcher({EPISODE_URL: EPISODE_PAGE, PLAYER_URL: PLAYER_PAGE})
    resolution = make_resolver(fetcher).resolve(REQUEST)

    assert resolution.ok
    assert resolution.state is ResolverState.ASSEMBLED
    assert resolution.reason is None
    assert resolution.sources == [VideoSource(quality="720p", url="https://cdn/a.mp4")]
    assert fetcher.requested == [EPISODE_URL, PLAYER_URL]


def test_resolve_player_url_not_found():
    """
    Tests that an episode page without any marker fails with PLAYER_URL_NOT_FOUND.
    """
    fetcher = FakeFetcher({EPISODE_URL: "<html><body>Episode not released</body></html>"})
    resolution = make_resolver(fetcher).resolve(REQUEST)

    assert not resolution.ok
    assert resolution.state is ResolverState.FAILED
    assert resolution.reason is FailureReason.PLAYER_URL_NOT_FOUND
    assert resolution.detail == "MarkerNotFound"
    assert resolution.failed_in is ResolverState.EXTRACTING_PLAYER_URL
    assert fetcher.requested == [EPISODE_URL]


def test_resolve_empty_player_url():
    """
    Tests that an empty player URL is not fetched.
    """
    fetcher = FakeFetcher({EPISODE_URL: "video_url&quot;:&quot;&quot;"})
    resolution = make_resolver(fetcher).resolve(REQUEST)

    assert resolution.reason is FailureReason.PLAYER_URL_NOT_FOUND
    assert resolution.detail == "EmptyExtraction"
    assert fetcher.requested == [EPISODE_URL]


def test_resolve_only_unlabelled_sources():
    """
    Tests that a parsed array without usable records fails with NO_PLAYABLE_SOURCES.
    """
    player_page = 'var video_sources = [{"src":"https://cdn/a.mp4"},{"src":"https://cdn/b.mp4"}];'
    fetcher = FakeFetcher({EPISODE_URL: EPISODE_PAGE, PLAYER_URL: player_page})
    resolution = make_resolver(fetcher).resolve(REQUEST)

    assert resolution.reason is FailureReason.NO_PLAYABLE_SOURCES
    assert resolution.detail == "EmptySourceList"
    assert resolution.sources == []


def test_resolve_missing_and_malformed_arrays_are_logged_apart():
    """
    Tests that a missing block and a malformed array share the reason but not the detail.
    """
    missing = FakeFetcher({EPISODE_URL: EPISODE_PAGE, PLAYER_URL: "<script>var player = {};</script>"})
    malformed = FakeFetcher({EPISODE_URL: EPISODE_PAGE, PLAYER_URL: "var video_sources = [{src: 'a'}];"})

    missing_resolution = make_resolver(missing).resolve(REQUEST)
    malformed_resolution = make_resolver(malformed).resolve(REQUEST)

    assert missing_resolution.reason is FailureReason.NO_PLAYABLE_SOURCES
    assert malformed_resolution.reason is FailureReason.NO_PLAYABLE_SOURCES
    assert missing_resolution.detail == "BlockNotFound"
    assert malformed_resolution.detail == "MalformedArray"


def test_resolve_episode_page_unavailable():
    """
    Tests that a non-2xx episode page fails with UPSTREAM_UNAVAILABLE and the player is never fetched.
    """
    fetcher = FakeFetcher({EPISODE_URL: 503, PLAYER_URL: PLAYER_PAGE})
    resolution = make_resolver(fetcher).resolve(REQUEST)

    assert resolution.reason is FailureReason.UPSTREAM_UNAVAILABLE
    assert resolution.failed_in is ResolverState.FETCHING_EPISODE_PAGE
    assert fetcher.requested == [EPISODE_URL]


def test_resolve_player_page_unavailable():
    """
    Tests that a failing player page fails with UPSTREAM_UNAVAILABLE.
    """
    fetcher = FakeFetcher({EPISODE_URL: EPISODE_PAGE})
    resolution = make_resolver(fetcher).resolve(REQUEST)

    assert resolution.reason is FailureReason.UPSTREAM_UNAVAILABLE
    assert resolution.failed_in is ResolverState.FETCHING_PLAYER_PAGE
    assert resolution.sources == []


def test_resolve_plain_quote_fallback():
    """
    Tests that the plain-quote marker variant is used when the site drops the entities.
    """
    episode_page = '<script>window.__DATA__ = {"video_url":"https://player.example/x"};</script>'
    fetcher = FakeFetcher({EPISODE_URL: episode_page, PLAYER_URL: PLAYER_PAGE})
    resolution = make_resolver(fetcher).resolve(REQUEST)

    assert resolution.ok
    assert fetcher.requested == [EPISODE_URL, PLAYER_URL]


def test_resolve_unterminated_player_url():
    """
    Tests that a player URL without its closing marker fails with PLAYER_URL_NOT_FOUND.
    """
    fetcher = FakeFetcher({EPISODE_URL: "<div>video_url&quot;:&quot;https://x</div>"})
    resolution = make_resolver(fetcher).resolve(REQUEST)

    assert resolution.reason is FailureReason.PLAYER_URL_NOT_FOUND
    assert resolution.detail == "UnterminatedMarker"
    assert resolution.failed_in is ResolverState.EXTRACTING_PLAYER_URL
    assert fetcher.requested == [EPISODE_URL]


def test_resolver_states():
    """
    Tests that the states are exactly the stages a resolution can stop in.
    """
    assert [state.name for state in ResolverState] == [
        "FETCHING_EPISODE_PAGE",
        "EXTRACTING_PLAYER_URL",
        "FETCHING_PLAYER_PAGE",
        "EXTRACTING_SOURCE_ARRAY",
        "ASSEMBLED",
        "FAILED",
    ]
