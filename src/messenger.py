from typing import Any

import requests

from src.constants import DEFAULT_REQUEST_TIMEOUT, GRAPH_API_MESSAGES_URL
from src.errors import ConfigurationError, UpstreamUnavailable
from src.replies import Reply

BUTTON_CAPTION = "فتح الرابط"


class MessengerClient:
    """Sends replies through the Facebook Messenger Send API."""

    def __init__(self, session: requests.Session, page_token: str | None, timeout: float = DEFAULT_REQUEST_TIMEOUT):
        self.session = session
        self.page_token = page_token
        self.timeout = timeout

    def send_text(self, recipient_id: str, text: str) -> None:
        self._send(recipient_id, {"text": text})

    def send_button(self, recipient_id: str, title: str, url: str) -> None:
        """Sends a button template with a single link button."""
        self._send(
            recipient_id,
            {
                "attachment": {
                    "type": "template",
                    "payload": {
                        "template_type": "button",
                        "text": title,
                        "buttons": [{"type": "web_url", "url": url, "title": BUTTON_CAPTION}],
                    },
                }
            },
        )

    def send_reply(self, recipient_id: str, reply: Reply) -> None:
        if reply.button_url:
            self.send_button(recipient_id, reply.text, reply.button_url)
        else:
            self.send_text(recipient_id, reply.text)

    def _send(self, recipient_id: str, message: dict[str, Any]) -> None:
        if not self.page_token:
            raise ConfigurationError("PAGE_TOKEN is not set.")

        try:
            response = self.session.post(
                GRAPH_API_MESSAGES_URL,
                params={"access_token": self.page_token},
                json={"recipient": {"id": recipient_id}, "message": message},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            # The request URL carries the page token
            status_code = e.response.status_code if e.response is not None else None
            raise UpstreamUnavailable(
                f"Could not send message to {recipient_id}: HTTP {status_code}",
                url=GRAPH_API_MESSAGES_URL,
                status_code=status_code,
            ) from e
        except requests.exceptions.RequestException as e:
            raise UpstreamUnavailable(
                f"Could not send message to {recipient_id}: {type(e).__name__}",
                url=GRAPH_API_MESSAGES_URL,
            ) from e
