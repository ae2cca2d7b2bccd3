"""Chat wrapper — responder → chat-completion envelope, plus session history."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Sequence

from manda.knowledge.base import Responder
from manda.knowledge.catalog import ASSISTANT_SYSTEM_PROMPT, GREETING
from manda.knowledge.persona import Mood, detect_mood
from manda.knowledge.schemas import ChatCompletion, ChatMessage, Choice, Role

logger = logging.getLogger(__name__)

PROCESSING_APOLOGY = (
    "I apologize, but I'm having trouble processing your request at the moment. "
    "Please try again or contact our support team for assistance."
)
KNOWLEDGE_BASE_APOLOGY = (
    "I apologize, but I'm having trouble connecting to my knowledge base at the moment. "
    "Please try again later or contact our support team for assistance."
)
SESSION_APOLOGY = (
    "I apologize, but I'm having trouble connecting to my knowledge base. "
    "Please try again later."
)


def format_completion(answer: str, model: str, created: int) -> ChatCompletion:
    """Wrap an answer in a single-choice completion envelope."""
    return ChatCompletion(
        id=f"emilia-response-{created}",
        model=model,
        created=created,
        choices=[Choice(index=0, message=ChatMessage(Role.ASSISTANT, answer))],
    )


def _euros(amount: float) -> str:
    if float(amount).is_integer():
        return f"€{int(amount):,}"
    return "€" + f"{amount:,.3f}".rstrip("0").rstrip(".")


class ChatService:
    """Turns a conversation into a chat-completion envelope."""

    def __init__(
        self,
        responder: Responder,
        model: str | None = None,
        reply_delay: float = 0.5,
        clock: Callable[[], float] = time.time,
    ):
        self.responder = responder
        self.model = model or getattr(responder, "model", "unknown")
        self.reply_delay = reply_delay
        self._clock = clock

    async def complete(self, messages: Sequence[ChatMessage]) -> ChatCompletion:
        """Answer the conversation. Responder errors propagate."""
        answer = await asyncio.to_thread(self.responder.reply, list(messages))
        if self.reply_delay > 0:
            await asyncio.sleep(self.reply_delay)
        return format_completion(answer, self.model, int(self._clock()))

    async def send(self, messages: Sequence[ChatMessage]) -> ChatCompletion:
        """Like ``complete`` but never raises; errors become an apology."""
        try:
            return await self.complete(messages)
        except Exception:
            logger.exception("Error processing chat message")
            return format_completion(PROCESSING_APOLOGY, self.model, int(self._clock()))

    async def business_valuation_response(self, query: str) -> str:
        messages = [
            ChatMessage(Role.SYSTEM, ASSISTANT_SYSTEM_PROMPT),
            ChatMessage(Role.USER, query),
        ]
        try:
            completion = await self.complete(messages)
        except Exception:
            logger.exception("Error getting business valuation response")
            return KNOWLEDGE_BASE_APOLOGY
        return completion.content

    async def analyze_valuation_factors(
        self,
        sector: str,
        revenue: float,
        ebitda: float,
        years_in_business: str,
    ) -> str:
        query = (
            f"Analyze the valuation factors for a {sector} business with "
            f"{_euros(revenue)} in revenue, {_euros(ebitda)} EBITDA, and "
            f"{years_in_business} years in business."
        )
        return await self.business_valuation_response(query)

    async def suggest_valuation_improvements(
        self,
        sector: str,
        current_valuation: float,
        weak_areas: Sequence[str],
    ) -> str:
        query = (
            f"Suggest practical improvements to increase the valuation of a {sector} "
            f"business currently valued at {_euros(current_valuation)}. The business "
            f"shows weaknesses in these areas: {', '.join(weak_areas)}."
        )
        return await self.business_valuation_response(query)

    async def explain_valuation_method(self, method: str) -> str:
        query = f'Explain the "{method}" valuation method in simple terms.'
        return await self.business_valuation_response(query)


class ChatSession:
    """Conversation state for one user.

    ``context`` is what the responder sees; ``transcript`` is what the user
    sees. They diverge on the greeting and on failed exchanges.
    """

    def __init__(self, service: ChatService, system_prompt: str = ASSISTANT_SYSTEM_PROMPT):
        self.service = service
        self.system_prompt = system_prompt
        self.reset()

    def reset(self) -> None:
        self.context: list[ChatMessage] = [ChatMessage(Role.SYSTEM, self.system_prompt)]
        self.transcript: list[ChatMessage] = [ChatMessage(Role.ASSISTANT, GREETING)]
        self.mood = Mood.NEUTRAL

    async def ask(self, text: str) -> str:
        """Send one user message and return the reply shown to the user."""
        text = text.strip()
        if not text:
            raise ValueError("Message must not be empty")

        user = ChatMessage(Role.USER, text)
        self.transcript.append(user)

        try:
            completion = await self.service.complete([*self.context, user])
        except Exception:
            logger.exception("Error in chat")
            self.transcript.append(ChatMessage(Role.ASSISTANT, SESSION_APOLOGY))
            self.mood = Mood.CONCERNED
            return SESSION_APOLOGY

        answer = completion.content
        reply = ChatMessage(Role.ASSISTANT, answer)
        self.context.extend([user, reply])
        self.transcript.append(reply)
        self.mood = detect_mood(answer)
        return answer
