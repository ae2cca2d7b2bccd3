"""Site FAQ responder: greeting-aware matcher backed by the public site copy."""

from __future__ import annotations

import re
from collections.abc import Sequence

from manda.knowledge import catalog
from manda.knowledge.base import Responder, last_user_message
from manda.knowledge.schemas import ChatMessage, FAQEntry, KeywordRule

GREETING_REPLY = (
    "Hello! I'm Emilia, your M&A assistant. How can I help you today with business "
    "valuation or M&A questions?"
)
GOODBYE_REPLY = (
    "Thank you for chatting with me! If you have more questions about M&A or business "
    "valuation, feel free to ask anytime."
)
THANKS_REPLY = (
    "You're welcome! I'm here to help with any other questions you might have about M&A "
    "and business valuation."
)
EMPTY_CONVERSATION_REPLY = "Hello! I'm Emilia, your M&A assistant. How can I help you today?"
FALLBACK_ANSWER = (
    "I can answer questions about M&A, business succession, and valuation services based "
    "on our website content. Could you please rephrase your question or check our FAQ "
    "page for more information? Alternatively, you can contact our M&A advisers directly "
    "for personalized assistance."
)

_SERVICES_ANSWER = (
    "We offer the following services:\n• "
    + "\n• ".join(catalog.SITE_SERVICES)
    + "\n\nFor more information, please visit our Services page or contact us directly."
)

# Checked before the FAQ table
_SMALL_TALK: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^(hello|hi|hey|greetings)", re.IGNORECASE), GREETING_REPLY),
    (re.compile(r"^(bye|goodbye|see you)", re.IGNORECASE), GOODBYE_REPLY),
    (re.compile(r"thank you|thanks", re.IGNORECASE), THANKS_REPLY),
)

SITE_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(
        "fees",
        frozenset({"fee", "cost", "price", "pricing", "charge", "intermediary"}),
        target_index=2,
    ),
    KeywordRule("timing", frozenset({"time", "duration", "long", "quick", "fast"}), target_index=1),
    KeywordRule(
        "advantages", frozenset({"advantage", "benefit", "strength", "pros"}), target_index=3
    ),
    KeywordRule(
        "location", frozenset({"rural", "local", "area", "location", "remote"}), target_index=0
    ),
    KeywordRule(
        "confidentiality",
        frozenset({"leak", "confidential", "secret", "private", "disclose", "nda"}),
        target_index=4,
    ),
    KeywordRule(
        "consultation",
        frozenset({"consult", "advice", "question", "help", "contact"}),
        target_index=5,
    ),
    KeywordRule(
        "loss_making", frozenset({"loss", "red", "profit", "negative", "debt"}), target_index=6
    ),
    KeywordRule(
        "valuation",
        frozenset({"calculate", "valuation", "transfer price", "worth", "value"}),
        target_index=7,
    ),
    KeywordRule(
        "partial_sale",
        frozenset({"one business", "partial", "division", "department", "unit", "part of"}),
        target_index=8,
    ),
    KeywordRule(
        "ceo_involvement",
        frozenset({"ceo", "president", "owner", "involve", "retire", "continue"}),
        target_index=9,
    ),
)

# Checked after the FAQ table
_CONTENT_GROUPS: tuple[tuple[re.Pattern[str], str], ...] = (
    (
        re.compile(r"company|about|who are you|what do you do", re.IGNORECASE),
        catalog.SITE_COMPANY_INFO,
    ),
    (re.compile(r"services|offer|provide", re.IGNORECASE), _SERVICES_ANSWER),
    (
        re.compile(r"europe|european|market|region|industry", re.IGNORECASE),
        catalog.SITE_EUROPEAN_MARKETS,
    ),
    (re.compile(r"contact|reach|call|email", re.IGNORECASE), catalog.SITE_CONTACT_INFO),
    (re.compile(r"valuation|value|worth", re.IGNORECASE), catalog.SITE_VALUATION_INFO),
)


class SiteFAQResponder(Responder):
    """Responder used by the floating site chat widget."""

    def __init__(self, faqs: tuple[FAQEntry, ...] = catalog.SITE_FAQ_ENTRIES):
        self.faqs = faqs
        self.model = "emilia-site-faq"

    def respond(self, query: str) -> str:
        for pattern, reply in _SMALL_TALK:
            if pattern.search(query):
                return reply

        entry = self.find_faq(query)
        if entry is not None:
            return entry.answer

        for pattern, reply in _CONTENT_GROUPS:
            if pattern.search(query):
                return reply

        return FALLBACK_ANSWER

    def reply(self, messages: Sequence[ChatMessage]) -> str:
        query = last_user_message(messages)
        if query is None:
            return EMPTY_CONVERSATION_REPLY
        return self.respond(query)

    def find_faq(self, query: str) -> FAQEntry | None:
        """Exact question match first, then the keyword table."""
        lowered = query.lower()
        for entry in self.faqs:
            if entry.question.lower() in lowered:
                return entry
        for rule in SITE_RULES:
            if rule.matches(lowered):
                return self.faqs[rule.target_index]
        return None
