"""Lambda handler for chat completions — triggered by API Gateway.

Thin wrapper around ChatService. All business logic lives in src/manda/.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
from typing import Any

from manda.config import load_settings
from manda.knowledge.chat import ChatService
from manda.knowledge.factory import responder_from_settings
from manda.knowledge.schemas import ChatMessage, Role

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("LOG_LEVEL", "INFO"))

# Initialize outside handler for Lambda warm-start reuse
_service: ChatService | None = None


def _get_service() -> ChatService:
    global _service
    if _service is not None:
        return _service

    _service = ChatService(responder_from_settings(load_settings()), reply_delay=0.0)
    return _service


def _error(status: int, message: str) -> dict[str, Any]:
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps({"error": message}),
    }


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Handle API Gateway request — parse messages, answer, return the envelope."""
    try:
        body = json.loads(event.get("body") or "{}")
    except (json.JSONDecodeError, TypeError):
        body = {}

    raw_messages = body.get("messages")
    question = body.get("question", "")

    if raw_messages:
        try:
            messages = [ChatMessage.from_dict(m) for m in raw_messages]
        except (KeyError, TypeError, ValueError):
            return _error(400, "Invalid 'messages' field")
    elif question:
        messages = [ChatMessage(Role.USER, question)]
    else:
        return _error(400, "Missing 'messages' or 'question' field")

    completion = asyncio.run(_get_service().send(messages))

    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(completion.to_dict()),
    }
