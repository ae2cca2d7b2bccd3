"""DeepSeek responder: remote chat completions over an OpenAI-compatible API.

Requires ``DEEPSEEK_API_KEY`` (or an explicit ``api_key``).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from typing import Any

import httpx

from manda.knowledge.base import Responder
from manda.knowledge.catalog import REMOTE_SYSTEM_PROMPT
from manda.knowledge.schemas import ChatMessage, Role

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "deepseek-chat"
DEFAULT_BASE_URL = "https://api.deepseek.com/v1"


class DeepSeekResponder(Responder):
    """Generate replies via the DeepSeek chat completions endpoint."""

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        api_key: str | None = None,
        temperature: float = 0.3,
        max_tokens: int = 1000,
        timeout: float = 60.0,
        system_prompt: str = REMOTE_SYSTEM_PROMPT,
        transport: httpx.BaseTransport | None = None,
    ):
        key = api_key or os.getenv("DEEPSEEK_API_KEY")
        if not key:
            raise ValueError("DEEPSEEK_API_KEY is required for the deepseek responder")

        self.model = model
        self.base_url = base_url.rstrip("/")
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.system_prompt = system_prompt
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Authorization": f"Bearer {key}"},
            transport=transport,
        )

    def respond(self, query: str) -> str:
        return self.reply([ChatMessage(Role.USER, query)])

    def reply(self, messages: Sequence[ChatMessage]) -> str:
        history = list(messages)
        if not history or history[0].role is not Role.SYSTEM:
            history.insert(0, ChatMessage(Role.SYSTEM, self.system_prompt))

        payload: dict[str, Any] = {
            "model": self.model,
            "messages": [m.to_dict() for m in history],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

        logger.info("Sending request to DeepSeek with model: %s", self.model)
        resp = self._client.post("/chat/completions", json=payload)
        resp.raise_for_status()
        return resp.json()["choices"][0]["message"]["content"]

    def close(self) -> None:
        self._client.close()
