from abc import ABC, abstractmethod

import requests

from src.constants import DEFAULT_REQUEST_TIMEOUT
from src.fetcher import PageFetcher
from src.models import EpisodeRequest, TitleInfo
from src.resolver import Resolution


class BaseProvider(ABC):
    """Abstract base class for an anime site provider."""

    def __init__(self, session: requests.Session, base_url: str, timeout: float = DEFAULT_REQUEST_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.fetcher = PageFetcher(session, timeout=timeout)

    @classmethod
    @abstractmethod
    def can_handle_url(cls, url: str) -> bool:
        """
        Check if the provider can handle the given URL.

        Args:
            url: The URL to check.

        Returns:
            True if the provider can handle the URL, False otherwise.
        """
        pass

    @abstractmethod
    def title_url(self, slug: str) -> str:
        """Build the URL of a title page."""
        pass

    @abstractmethod
    def episode_url(self, request: EpisodeRequest) -> str:
        """Build the URL of an episode page."""
        pass

    @abstractmethod
    def get_title_info(self, slug: str) -> TitleInfo:
        """
        Get the metadata of a title.

        Args:
            slug: The slug of the title.

        Returns:
            The title's metadata.

        Raises:
            TitleNotFound: If the site has no such title.
            UpstreamUnavailable: If the page cannot be fetched.
        """
        pass

    @abstractmethod
    def get_episode_sources(self, request: EpisodeRequest) -> Resolution:
        """
        Resolve the playable video sources of an episode.

        Args:
            request: The title slug and episode number.

        Returns:
            The outcome of the resolution. Failures are reported in the
            Resolution rather than raised.
        """
        pass
