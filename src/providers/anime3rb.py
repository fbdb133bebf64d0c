from bs4 import BeautifulSoup, Tag

from src.constants import (
    ANIME3RB_EPISODE_URL_TEMPLATE,
    ANIME3RB_TITLE_URL_TEMPLATE,
    PLAYER_URL_MARKERS,
    TITLE_INFO_LABELS,
    TITLE_NOT_FOUND_MARKER,
    VIDEO_SOURCES_BLOCK,
)
from src.errors import TitleNotFound
from src.extractors import marker_pairs
from src.models import EpisodeRequest, TitleInfo
from src.providers.base import BaseProvider
from src.resolver import EpisodeResolver, Resolution
from src.utils import log


def _meta_content(soup: BeautifulSoup, prop: str) -> str | None:
    tag = soup.find("meta", attrs={"property": prop})
    if not isinstance(tag, Tag):
        return None
    content = tag.get("content")
    if isinstance(content, list):
        content = content[0] if content else None
    return str(content).strip() if content else None


def _labelled_value(soup: BeautifulSoup, label: str) -> str | None:
    """Finds the text of the element that follows the span holding the label."""
    span = soup.find("span", string=lambda text: bool(text) and label in text)
    if not isinstance(span, Tag):
        return None
    value = span.find_next_sibling()
    if not isinstance(value, Tag):
        return None
    return value.get_text(strip=True) or None


class Anime3rbProvider(BaseProvider):
    """Provider for anime3rb.com."""

    @classmethod
    def can_handle_url(cls, url: str) -> bool:
        """Check if the provider can handle the given URL."""

        return "anime3rb.com" in url

    def title_url(self, slug: str) -> str:
        return ANIME3RB_TITLE_URL_TEMPLATE.format(base_url=self.base_url, slug=slug)

    def episode_url(self, request: EpisodeRequest) -> str:
        return ANIME3RB_EPISODE_URL_TEMPLATE.format(
            base_url=self.base_url,
            slug=request.slug,
            episode=request.episode,
        )

    def get_title_info(self, slug: str) -> TitleInfo:
        """Scrapes the Open Graph tags and the info panel of a title page."""
        url = self.title_url(slug)
        log(f"📄 Fetching title page: {url}", indent=1)
        document = self.fetcher.fetch(url)
        soup = BeautifulSoup(document.body, "html.parser")

        title = _meta_content(soup, "og:title")
        if not title or TITLE_NOT_FOUND_MARKER in title:
            raise TitleNotFound(f"Title '{slug}' not found", details=url)

        rating_tag = soup.select_one(".text-yellow-500")
        rating = rating_tag.get_text(strip=True) if rating_tag else None

        labelled = {field: _labelled_value(soup, label) for field, label in TITLE_INFO_LABELS.items()}

        return TitleInfo(
            title=title,
            url=url,
            description=_meta_content(soup, "og:description"),
            image=_meta_content(soup, "og:image"),
            rating=rating or None,
            **labelled,
        )

    def get_episode_sources(self, request: EpisodeRequest) -> Resolution:
        """Resolves the episode page's player and the sources embedded in it."""
        resolver = EpisodeResolver(
            fetcher=self.fetcher,
            episode_url=self.episode_url,
            player_url_markers=marker_pairs(PLAYER_URL_MARKERS),
            sources_block=VIDEO_SOURCES_BLOCK,
        )
        return resolver.resolve(request)
