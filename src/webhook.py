"""
Messenger webhook intake.

These functions sit between an HTTP layer and handle_message: one answers
the subscription handshake, the other turns a delivered event into replies
sent back to each sender. Neither raises for a bad request or a failed
delivery, so the HTTP layer can always acknowledge the event.
"""

from collections.abc import Iterator, Mapping
from typing import Any

from src.app import deliver_replies, handle_message
from src.config import Settings
from src.errors import ConfigurationError, UpstreamUnavailable
from src.utils import log


def verify_subscription(params: Mapping[str, str], verify_token: str | None) -> str | None:
    """
    Checks the webhook subscription handshake.

    Args:
        params: The query parameters of the verification request.
        verify_token: The token configured for the webhook.

    Returns:
        The hub.challenge to echo back, or None if the request must be rejected.
    """
    if not verify_token:
        return None
    if params.get("hub.mode") != "subscribe" or params.get("hub.verify_token") != verify_token:
        return None
    return params.get("hub.challenge", "")


def iter_messages(payload: Mapping[str, Any]) -> Iterator[tuple[str, str]]:
    """Yields (sender id, text) for every text message in a page event."""
    if payload.get("object") != "page":
        return

    for entry in payload.get("entry") or []:
        if not isinstance(entry, dict):
            continue
        for event in entry.get("messaging") or []:
            if not isinstance(event, dict):
                continue
            sender_id = (event.get("sender") or {}).get("id")
            text = (event.get("message") or {}).get("text")
            if sender_id and isinstance(text, str) and text.strip():
                yield str(sender_id), text


def handle_event(payload: Mapping[str, Any], settings: Settings) -> int:
    """
    Answers every text message in a webhook event.

    Args:
        payload: The JSON body posted to the webhook.
        settings: The bot settings.

    Returns:
        The number of messages handled.
    """
    handled = 0
    for sender_id, text in iter_messages(payload):
        replies = handle_message(text, settings)
        try:
            deliver_replies(replies, sender_id, settings)
        except (ConfigurationError, UpstreamUnavailable) as e:
            log(f"❌ Could not reply to {sender_id}: {e}", indent=1)
        handled += 1

    if not handled:
        log("⚠️ Webhook event without text messages ignored.", indent=1)
    return handled
