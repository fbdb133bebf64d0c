from unittest.mock import patch

from src.config import Settings
from src.errors import UpstreamUnavailable
from src.replies import Reply
from src.webhook import handle_event, iter_messages, verify_subscription

SETTINGS = Settings(page_token="token", verify_token="hook-secret")


def make_event(*messages: tuple[str, str]) -> dict:
    return {
        "object": "page",
        "entry": [{"messaging": [{"sender": {"id": sender}, "message": {"text": text}}]} for sender, text in messages],
    }


def test_verify_subscription():
    """
    Tests that the challenge is echoed only for a subscribe request with the right token.
    """
    params = {"hub.mode": "subscribe", "hub.verify_token": "hook-secret", "hub.challenge": "1158201444"}
    assert verify_subscription(params, "hook-secret") == "1158201444"
    assert verify_subscription({**params, "hub.verify_token": "wrong"}, "hook-secret") is None
    assert verify_subscription({**params, "hub.mode": "unsubscribe"}, "hook-secret") is None
    assert verify_subscription(params, None) is None


def test_iter_messages_skips_non_text_events():
    """
    Tests that only text messages with a sender are picked from a page event.
    """
    payload = make_event(("1", "naruto"), ("2", "one piece 3"))
    payload["entry"].append({"messaging": [{"sender": {"id": "3"}, "delivery": {"mids": ["m1"]}}]})
    payload["entry"].append({"messaging": [{"sender": {"id": "4"}, "message": {"text": "   "}}]})

    assert list(iter_messages(payload)) == [("1", "naruto"), ("2", "one piece 3")]
    assert list(iter_messages({"object": "user", "entry": payload["entry"]})) == []
    assert list(iter_messages({})) == []


def test_handle_event_replies_to_each_sender():
    """
    Tests that every message is handled and its replies go back to its sender.
    """
    with (
        patch("src.webhook.handle_message", side_effect=lambda text, settings: [Reply(text.upper())]) as handle,
        patch("src.webhook.deliver_replies") as deliver,
    ):
        handled = handle_event(make_event(("1", "naruto"), ("2", "list")), SETTINGS)

    assert handled == 2
    assert handle.call_count == 2
    assert [c.args[:2] for c in deliver.call_args_list] == [([Reply("NARUTO")], "1"), ([Reply("LIST")], "2")]


def test_handle_event_survives_delivery_failure():
    """
    Tests that a failed delivery to one sender does not stop the others.
    """
    with (
        patch("src.webhook.handle_message", return_value=[Reply("hi")]),
        patch("src.webhook.deliver_replies", side_effect=[UpstreamUnavailable("HTTP 400"), None]) as deliver,
    ):
        handled = handle_event(make_event(("1", "naruto"), ("2", "naruto")), SETTINGS)

    assert handled == 2
    assert deliver.call_count == 2
