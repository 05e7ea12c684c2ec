from __future__ import annotations
import json
from typing import Any, Optional

import structlog

from pipeline_feedback.clients.http_transport import post_request
from pipeline_feedback.config import Settings
from pipeline_feedback.schemas.analysis import ChatMessage

log = structlog.get_logger(__name__)

NO_RESPONSE_TEXT = "No response from ChatGPT."


def _extract_content(result: Any) -> Optional[str]:
    """choices[0].message.content, or None when any level is missing."""
    if not isinstance(result, dict):
        return None
    choices = result.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    message = choices[0].get("message") if isinstance(choices[0], dict) else None
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    return content if isinstance(content, str) and content else None


class LLMClient:
    def __init__(self, settings: Settings) -> None:
        self.url = str(settings.OPENAI_API_URL)
        self.model = settings.OPENAI_MODEL
        self._api_key = settings.OPENAI_API_KEY.get_secret_value()

    def build_payload(self, messages: list[ChatMessage]) -> dict:
        return {
            "model": self.model,
            "messages": [m.model_dump() for m in messages],
        }

    def suggest_fix(self, messages: list[ChatMessage]) -> str:
        """
        Send the prompt to the chat completions endpoint and return the suggestion text.
        An empty HTTP body raises TransportError; a body without content falls back
        to NO_RESPONSE_TEXT.
        """
        body = post_request(self.url, json.dumps(self.build_payload(messages)), self._api_key)

        try:
            result = json.loads(body)
        except ValueError:
            log.warning("llm.invalid_json", url=self.url, body=body[:200])
            return NO_RESPONSE_TEXT

        content = _extract_content(result)
        if content is None:
            log.warning("llm.no_content", url=self.url, error=(result.get("error") if isinstance(result, dict) else None))
            return NO_RESPONSE_TEXT
        return content
