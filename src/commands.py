import re
from dataclasses import dataclass

from src.constants import HELP_COMMAND
from src.models import EpisodeRequest
from src.utils import slugify

EPISODE_COMMAND_RE = re.compile(r"^(.*)\s+(\d+)$")


@dataclass(frozen=True)
class HelpCommand:
    pass


@dataclass(frozen=True)
class EpisodeCommand:
    request: EpisodeRequest


@dataclass(frozen=True)
class TitleInfoCommand:
    slug: str


Command = HelpCommand | EpisodeCommand | TitleInfoCommand


def parse_command(text: str) -> Command | None:
    """
    Maps a chat message to a command.

    'list' asks for help, '<title> <number>' asks for an episode, and any
    other text is treated as a title.

    Args:
        text: The message as typed by the user.

    Returns:
        The command, or None for an empty message.
    """
    text = text.strip().lower()
    if not text:
        return None

    if text == HELP_COMMAND:
        return HelpCommand()

    match = EPISODE_COMMAND_RE.match(text)
    if match:
        slug = slugify(match.group(1))
        # Arabic-Indic digits are rewritten as ASCII ones for the URL
        episode = int(match.group(2))
        if slug and episode > 0:
            return EpisodeCommand(EpisodeRequest(slug=slug, episode=str(episode)))

    return TitleInfoCommand(slug=slugify(text))
