import requests

from src.constants import DEFAULT_REQUEST_TIMEOUT
from src.providers.anime3rb import Anime3rbProvider
from src.providers.base import BaseProvider

# A registry of all available providers
PROVIDER_REGISTRY: list[type[BaseProvider]] = [
    Anime3rbProvider,
]


def get_provider(url: str, session: requests.Session, timeout: float = DEFAULT_REQUEST_TIMEOUT) -> BaseProvider:
    """
    Factory function to get a provider instance based on the URL.

    Args:
        url: The base URL of the site.
        session: The requests Session the provider fetches pages with.
        timeout: Timeout in seconds for each request.

    Returns:
        An instance of the appropriate provider.

    Raises:
        ValueError: If no suitable provider is found for the given URL.
    """
    for provider_class in PROVIDER_REGISTRY:
        if provider_class.can_handle_url(url):
            return provider_class(session, url, timeout=timeout)
    raise ValueError(f"No suitable provider found for URL: {url}")
