"""Tests for the keyword knowledge-base responder."""

from __future__ import annotations

import itertools

import pytest

from manda.knowledge import catalog
from manda.knowledge.knowledge_base import (
    FALLBACK_ANSWER,
    KNOWLEDGE_RULES,
    KnowledgeBaseResponder,
    compose_methodology,
)
from manda.knowledge.schemas import ChatMessage, FAQEntry, KeywordRule, Role

FAQ = catalog.FAQ_ENTRIES

# ---------------------------------------------------------------------------
# Exact question match
# ---------------------------------------------------------------------------


class TestExactMatch:
    def test_full_question_returns_its_answer(self, responder):
        question = FAQ[1].question
        assert responder.respond(question) == FAQ[1].answer

    def test_question_embedded_in_longer_text(self, responder):
        query = f"Hi there. {FAQ[4].question.upper()} Thanks!"
        assert responder.respond(query) == FAQ[4].answer

    def test_exact_match_beats_keyword_rules(self):
        # "time" would hit the timing rule; the exact question wins first
        faqs = (FAQEntry("Any time for tea?", "Always."),) + FAQ[1:]
        responder = KnowledgeBaseResponder(faqs=faqs)
        assert responder.respond("any time for tea?") == "Always."


# ---------------------------------------------------------------------------
# Keyword rules
# ---------------------------------------------------------------------------


class TestKeywordRules:
    @pytest.mark.parametrize(
        ("query", "index"),
        [
            ("How long will this take?", 1),
            ("What are your fees?", 2),
            ("Why choose you over others?", 3),
            ("Is my information kept confidential?", 4),
            ("I would like some advice", 5),
            ("We are unprofitable at the moment", 6),
            ("How is my company calculated?", 7),
            ("Can I sell only one of my companies?", 8),
            ("Can the founder stay on?", 9),
        ],
    )
    def test_rule_maps_to_faq_entry(self, responder, query, index):
        assert responder.respond(query) == FAQ[index].answer

    def test_first_matching_rule_wins(self, responder):
        # both timing ("time") and fees ("cost") match; timing is declared first
        assert responder.respond("what time and cost?") == FAQ[1].answer

    def test_matching_is_case_insensitive(self, responder):
        assert responder.respond("  WHAT ARE YOUR FEES  ") == FAQ[2].answer

    def test_rule_order_is_declaration_order(self):
        names = [rule.name for rule in KNOWLEDGE_RULES]
        assert names == [
            "timing",
            "fees",
            "advantages",
            "confidentiality",
            "consultation",
            "loss_making",
            "valuation_calculation",
            "partial_sale",
            "ceo_involvement",
            "european_markets",
            "valuation_services",
            "approach",
            "about",
            "contact",
        ]

    def test_match_rule_returns_none_without_match(self, responder):
        assert responder.match_rule("qwerty") is None


class TestComposedAnswers:
    def test_methodology_sub_branch(self, responder):
        answer = responder.respond("how is the value calculated in detail?")
        assert answer == compose_methodology()
        assert "\n\n" in answer

    def test_markets_outlook_by_default(self, responder):
        answer = responder.respond("tell me about the european market")
        assert answer == catalog.MARKETS_OVERVIEW + "\n\n" + catalog.MARKETS_OUTLOOK

    def test_markets_sector_branch(self, responder):
        answer = responder.respond("which sectors in europe are growing?")
        assert answer.startswith(catalog.MARKETS_OVERVIEW)
        assert "Key sectors with growth potential:" in answer
        assert catalog.MARKET_SECTORS[0] in answer

    def test_about(self, responder):
        answer = responder.respond("who are you?")
        assert answer.startswith(f"{catalog.COMPANY_NAME} specializes in")

    def test_contact(self, responder):
        assert responder.respond("give me your email") == catalog.COMPANY_CONTACT


# ---------------------------------------------------------------------------
# Fallback and contract
# ---------------------------------------------------------------------------


class TestFallback:
    def test_unmatched_query(self, responder):
        assert responder.respond("qwerty") == FALLBACK_ANSWER

    def test_empty_query(self, responder):
        assert responder.respond("") == FALLBACK_ANSWER

    def test_deterministic(self, responder):
        assert responder.respond("what are your fees") == responder.respond("what are your fees")


class TestReply:
    def test_answers_last_user_message(self, responder):
        messages = [
            ChatMessage(Role.SYSTEM, "system"),
            ChatMessage(Role.USER, "qwerty"),
            ChatMessage(Role.ASSISTANT, "..."),
            ChatMessage(Role.USER, "What are your fees?"),
        ]
        assert responder.reply(messages) == FAQ[2].answer

    def test_no_user_message_raises(self, responder):
        with pytest.raises(ValueError, match="No user message found"):
            responder.reply([ChatMessage(Role.SYSTEM, "system")])


class TestKeywordRule:
    def test_rule_without_target_or_composer_raises(self):
        rule = KeywordRule("broken", frozenset({"x"}))
        with pytest.raises(ValueError, match="broken"):
            rule.answer("x", FAQ)

    def test_predicate_adds_a_conjunction(self):
        rule = KeywordRule(
            "p",
            frozenset({"solo"}),
            target_index=0,
            predicate=lambda q: "left" in q and "right" in q,
        )
        assert rule.matches("solo")
        assert rule.matches("left and right")
        assert not rule.matches("left only")

    @pytest.mark.parametrize(
        "query",
        ["how is it calculated", "valuation method", "determine value", "value calculation"],
    )
    def test_valuation_calculation_terms(self, responder, query):
        assert responder.match_rule(query).name == "valuation_calculation"

    def test_calculate_alone_is_not_valuation_calculation(self, responder):
        rule = responder.match_rule("calculate")
        assert rule is None or rule.name != "valuation_calculation"


# ---------------------------------------------------------------------------
# Pairwise precedence
# ---------------------------------------------------------------------------

# One phrase per rule that matches that rule and nothing declared before it
REPRESENTATIVE = {
    "timing": "duration",
    "fees": "fee",
    "advantages": "benefit",
    "confidentiality": "confidential",
    "consultation": "advice",
    "loss_making": "loss",
    "valuation_calculation": "valuation method",
    "partial_sale": "portion",
    "ceo_involvement": "ceo",
    "european_markets": "europe",
    "valuation_services": "worth",
    "approach": "process",
    "about": "who are you",
    "contact": "phone",
}


class TestPrecedence:
    def test_every_rule_has_a_representative(self):
        assert set(REPRESENTATIVE) == {rule.name for rule in KNOWLEDGE_RULES}

    @pytest.mark.parametrize("rule", KNOWLEDGE_RULES, ids=lambda r: r.name)
    def test_representative_selects_its_rule(self, responder, rule):
        assert responder.match_rule(REPRESENTATIVE[rule.name]) is rule

    @pytest.mark.parametrize(
        ("first", "second"),
        list(itertools.combinations(KNOWLEDGE_RULES, 2)),
        ids=lambda r: r.name,
    )
    def test_earlier_rule_wins_for_every_pair(self, responder, first, second):
        query = f"{REPRESENTATIVE[second.name]} and {REPRESENTATIVE[first.name]}"
        assert responder.match_rule(query) is first
