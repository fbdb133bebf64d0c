import sys
from typing import NoReturn

from src.app import deliver_replies, handle_message
from src.config import Settings, load_settings
from src.errors import ConfigurationError, UpstreamUnavailable
from src.replies import Reply
from src.utils import log


def print_replies(replies: list[Reply]) -> None:
    """Prints the replies the way they would appear in the chat."""
    for reply in replies:
        log(reply.text, top=1)
        if reply.button_url:
            log(f"🔘 {reply.button_url}", indent=1)


def process(text: str, settings: Settings) -> None:
    """Handles one message and shows or delivers its replies."""
    replies = handle_message(text, settings)
    print_replies(replies)

    if settings.recipient_id and replies:
        try:
            deliver_replies(replies, settings.recipient_id, settings)
            log(f"📨 Sent {len(replies)} message(s) to {settings.recipient_id}.", indent=1)
        except (ConfigurationError, UpstreamUnavailable) as e:
            log(f"❌ Could not deliver replies: {e}", indent=1)


def main() -> NoReturn:
    """The main entry point of the script."""
    settings = load_settings()

    if len(sys.argv) > 1:
        process(" ".join(sys.argv[1:]), settings)
        sys.exit(0)

    try:
        log("🚀 Bot console started. Type a title, or a title and an episode number. Ctrl+C to exit.")
        for line in sys.stdin:
            process(line, settings)
            log("---", top=1)
    except KeyboardInterrupt:
        log("🛑 Interrupted. Exiting.", top=2)
    sys.exit(0)


if __name__ == "__main__":
    main()
