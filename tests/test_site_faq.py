"""Tests for the site widget FAQ responder."""

from __future__ import annotations

from manda.knowledge import catalog
from manda.knowledge.schemas import ChatMessage, Role
from manda.knowledge.site_faq import (
    EMPTY_CONVERSATION_REPLY,
    FALLBACK_ANSWER,
    GOODBYE_REPLY,
    GREETING_REPLY,
    THANKS_REPLY,
)


class TestSmallTalk:
    def test_greeting(self, site_responder):
        assert site_responder.respond("Hello there") == GREETING_REPLY

    def test_greeting_only_at_start(self, site_responder):
        assert site_responder.respond("well, hello") != GREETING_REPLY

    def test_goodbye(self, site_responder):
        assert site_responder.respond("Goodbye!") == GOODBYE_REPLY

    def test_thanks_anywhere(self, site_responder):
        assert site_responder.respond("ok, thanks a lot") == THANKS_REPLY


class TestFAQMatching:
    def test_fees_checked_before_consultation(self, site_responder):
        answer = site_responder.respond("Can you help me with the fee?")
        assert answer == catalog.SITE_FAQ_ENTRIES[2].answer

    def test_site_timing_answer_is_extended(self, site_responder):
        answer = site_responder.respond("how long does it take")
        assert answer == catalog.SITE_FAQ_ENTRIES[1].answer
        assert answer.startswith(catalog.FAQ_ENTRIES[1].answer)
        assert len(answer) > len(catalog.FAQ_ENTRIES[1].answer)

    def test_find_faq_exact_question(self, site_responder):
        entry = site_responder.find_faq(catalog.SITE_FAQ_ENTRIES[0].question)
        assert entry is catalog.SITE_FAQ_ENTRIES[0]

    def test_find_faq_none(self, site_responder):
        assert site_responder.find_faq("qwerty") is None


class TestContentGroups:
    def test_company(self, site_responder):
        assert site_responder.respond("tell me about your company") == catalog.SITE_COMPANY_INFO

    def test_services_lists_every_service(self, site_responder):
        answer = site_responder.respond("what services do you provide?")
        assert answer.startswith("We offer the following services:")
        for service in catalog.SITE_SERVICES:
            assert f"• {service}" in answer

    def test_fallback(self, site_responder):
        assert site_responder.respond("qwerty") == FALLBACK_ANSWER


class TestReply:
    def test_empty_conversation(self, site_responder):
        assert site_responder.reply([]) == EMPTY_CONVERSATION_REPLY

    def test_uses_last_user_message(self, site_responder):
        messages = [
            ChatMessage(Role.USER, "qwerty"),
            ChatMessage(Role.ASSISTANT, FALLBACK_ANSWER),
            ChatMessage(Role.USER, "hi"),
        ]
        assert site_responder.reply(messages) == GREETING_REPLY
