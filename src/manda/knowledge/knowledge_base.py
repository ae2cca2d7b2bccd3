"""Knowledge-base responder: ordered keyword rules over the FAQ catalog.

Rules are evaluated in declaration order and the first match wins. The order
is part of the observable behaviour; never sort or score the rules.
"""

from __future__ import annotations

import logging

from manda.knowledge import catalog
from manda.knowledge.base import Responder
from manda.knowledge.schemas import FAQEntry, KeywordRule

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "emilia-knowledge-base"

FALLBACK_ANSWER = (
    "I don't have specific information about that in my knowledge base. Would you like "
    "to know about our valuation services, our approach to M&A, or information about "
    "European markets? You can also contact our M&A Advisers directly through the "
    "contact form on our website."
)

_SECTION_SEP = "\n\n"

# ---------------------------------------------------------------------------
# Composed answers
# ---------------------------------------------------------------------------

# (triggers, heading, items), checked in order after the markets rule fires
_MARKET_BRANCHES: tuple[tuple[tuple[str, ...], str, tuple[str, ...]], ...] = (
    (("sector", "industry"), "Key sectors with growth potential:", catalog.MARKET_SECTORS),
    (
        ("region", "country", "location"),
        "Regional hotspots for expansion:",
        catalog.MARKET_REGIONS,
    ),
    (
        ("trend", "future", "emerging"),
        "Emerging trends shaping the market:",
        catalog.MARKET_TRENDS,
    ),
    (
        ("support", "fund", "initiative", "government"),
        "Governmental support and funding initiatives:",
        catalog.MARKET_SUPPORT,
    ),
)

_METHODOLOGY_TRIGGERS = ("methodology", "detail", "approach")


def _has_any(query: str, words: tuple[str, ...]) -> bool:
    return any(word in query for word in words)


def compose_methodology() -> str:
    return (
        "We use several valuation methods to accurately determine your business's worth:"
        + _SECTION_SEP
        + _SECTION_SEP.join(catalog.VALUATION_METHODOLOGY)
        + _SECTION_SEP
        + "Our AI enhancement further improves accuracy through:"
        + _SECTION_SEP
        + _SECTION_SEP.join(catalog.VALUATION_AI_FEATURES)
    )


def _compose_valuation_calculation(query: str) -> str:
    if _has_any(query, _METHODOLOGY_TRIGGERS):
        return compose_methodology()
    return catalog.FAQ_ENTRIES[7].answer


def _compose_markets(query: str) -> str:
    response = catalog.MARKETS_OVERVIEW + _SECTION_SEP
    for triggers, heading, items in _MARKET_BRANCHES:
        if _has_any(query, triggers):
            return response + heading + _SECTION_SEP + _SECTION_SEP.join(items)
    return response + catalog.MARKETS_OUTLOOK


def _compose_valuation_services(query: str) -> str:
    return (
        catalog.VALUATION_OVERVIEW
        + _SECTION_SEP
        + "Our valuation service offers:"
        + _SECTION_SEP
        + _SECTION_SEP.join(catalog.VALUATION_FEATURES)
    )


def _compose_approach(query: str) -> str:
    return (
        catalog.APPROACH_OVERVIEW
        + _SECTION_SEP
        + catalog.APPROACH_DETAIL
        + _SECTION_SEP
        + "Our key differentiators:"
        + _SECTION_SEP
        + _SECTION_SEP.join(catalog.APPROACH_FEATURES)
    )


def _compose_about(query: str) -> str:
    return (
        f"{catalog.COMPANY_NAME} specializes in {catalog.COMPANY_SPECIALTY}. "
        f"We offer {catalog.COMPANY_VALUE_PROPOSITION}."
    )


def _compose_contact(query: str) -> str:
    return catalog.COMPANY_CONTACT


_VALUATION_CALC_TRIGGERS = frozenset({"valuation method", "determine value", "value calculation"})


def _asks_how_calculated(query: str) -> bool:
    return "how is" in query and "calculate" in query


# ---------------------------------------------------------------------------
# Rule table (declaration order is evaluation order)
# ---------------------------------------------------------------------------

KNOWLEDGE_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(
        "timing",
        frozenset({"how long", "time", "duration", "how much time"}),
        target_index=1,
    ),
    KeywordRule(
        "fees",
        frozenset({"fee", "cost", "price", "charge", "pay"}),
        target_index=2,
    ),
    KeywordRule(
        "advantages",
        frozenset({"advantage", "benefit", "why choose", "strength"}),
        target_index=3,
    ),
    KeywordRule(
        "confidentiality",
        frozenset({"confidential", "leak", "secret", "private", "nda"}),
        target_index=4,
    ),
    KeywordRule(
        "consultation",
        frozenset({"consult", "advice", "not decided", "thinking about"}),
        target_index=5,
    ),
    KeywordRule(
        "loss_making",
        frozenset({"loss", "red", "unprofitable", "negative profit"}),
        target_index=6,
    ),
    KeywordRule(
        "valuation_calculation",
        _VALUATION_CALC_TRIGGERS,
        composer=_compose_valuation_calculation,
        predicate=_asks_how_calculated,
    ),
    KeywordRule(
        "partial_sale",
        frozenset({"part", "only one", "portion", "division"}),
        target_index=8,
    ),
    KeywordRule(
        "ceo_involvement",
        frozenset({"ceo", "owner", "founder", "continue", "stay", "retire"}),
        target_index=9,
    ),
    KeywordRule(
        "european_markets",
        frozenset({"europe", "market", "economic", "sector", "industry", "region"}),
        composer=_compose_markets,
    ),
    KeywordRule(
        "valuation_services",
        frozenset({"valuation", "worth", "value", "how much is", "estimate"}),
        composer=_compose_valuation_services,
    ),
    KeywordRule(
        "approach",
        frozenset({"approach", "process", "how do you", "how you", "method", "work"}),
        composer=_compose_approach,
    ),
    KeywordRule(
        "about",
        frozenset({"about", "who are you", "company", "what is", "tell me about"}),
        composer=_compose_about,
    ),
    KeywordRule(
        "contact",
        frozenset({"contact", "reach", "phone", "email", "talk to"}),
        composer=_compose_contact,
    ),
)


class KnowledgeBaseResponder(Responder):
    """Deterministic FAQ matcher with no external calls."""

    def __init__(
        self,
        faqs: tuple[FAQEntry, ...] = catalog.FAQ_ENTRIES,
        rules: tuple[KeywordRule, ...] = KNOWLEDGE_RULES,
        fallback: str = FALLBACK_ANSWER,
        model: str = DEFAULT_MODEL,
    ):
        self.faqs = faqs
        self.rules = rules
        self.fallback = fallback
        self.model = model

    def respond(self, query: str) -> str:
        normalized = query.lower().strip()

        for entry in self.faqs:
            if entry.question.lower() in normalized:
                return entry.answer

        rule = self.match_rule(normalized)
        if rule is None:
            return self.fallback

        logger.debug("Query matched rule '%s'", rule.name)
        return rule.answer(normalized, self.faqs)

    def match_rule(self, normalized_query: str) -> KeywordRule | None:
        """Return the first rule that matches an already-normalized query."""
        for rule in self.rules:
            if rule.matches(normalized_query):
                return rule
        return None
