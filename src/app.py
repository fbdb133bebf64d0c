import requests

from src.commands import EpisodeCommand, HelpCommand, TitleInfoCommand, parse_command
from src.config import Settings, load_settings
from src.errors import TitleNotFound, UpstreamUnavailable
from src.messenger import MessengerClient
from src.providers import get_provider
from src.providers.base import BaseProvider
from src.replies import (
    Reply,
    episode_replies,
    help_reply,
    service_unavailable_reply,
    title_info_replies,
    title_not_found_reply,
)
from src.utils import log


def handle_message(text: str, settings: Settings | None = None) -> list[Reply]:
    """
    Handles a single chat message and returns the replies to send.

    Every message gets its own session, so concurrent messages share no state.
    Failures never escape; they are turned into an apology reply.

    Args:
        text: The message as typed by the user.
        settings: The bot settings, loaded from config.yaml when omitted.

    Returns:
        The replies in the order they should be sent.
    """
    command = parse_command(text)
    if command is None:
        return []

    if isinstance(command, HelpCommand):
        return [help_reply()]

    if settings is None:
        settings = load_settings()

    with requests.Session() as session:
        try:
            provider = get_provider(settings.site_url, session, timeout=settings.request_timeout)
        except ValueError as e:
            log(f"❌ {e}", indent=1)
            return [service_unavailable_reply()]

        if isinstance(command, EpisodeCommand):
            return _handle_episode(provider, command)
        return _handle_title_info(provider, command)


def _handle_episode(provider: BaseProvider, command: EpisodeCommand) -> list[Reply]:
    request = command.request
    log(f"--- Episode request: {request.slug} #{request.episode} ---", top=1)
    resolution = provider.get_episode_sources(request)
    return episode_replies(resolution, provider.episode_url(request))


def _handle_title_info(provider: BaseProvider, command: TitleInfoCommand) -> list[Reply]:
    log(f"--- Title request: {command.slug} ---", top=1)
    try:
        info = provider.get_title_info(command.slug)
    except (TitleNotFound, UpstreamUnavailable) as e:
        log(f"❌ Error fetching info for {command.slug}: {e}", indent=1)
        return [title_not_found_reply(command.slug)]

    log(f"✅ Found title: {info.title}", indent=1)
    return title_info_replies(info)


def deliver_replies(replies: list[Reply], recipient_id: str, settings: Settings) -> None:
    """Sends the replies to a Messenger recipient, stopping at the first failure."""
    with requests.Session() as session:
        client = MessengerClient(session, settings.page_token, timeout=settings.request_timeout)
        for reply in replies:
            client.send_reply(recipient_id, reply)
