"""Tests for the responder and transport factories."""

from __future__ import annotations

import pytest

from manda.benchmarks.factory import available_transports, transport_factory
from manda.benchmarks.transport import MockTransport
from manda.config import Settings
from manda.knowledge.factory import (
    available_responders,
    clear_cache,
    get_responder,
    responder_from_settings,
)
from manda.knowledge.knowledge_base import KnowledgeBaseResponder
from manda.knowledge.site_faq import SiteFAQResponder

# ---------------------------------------------------------------------------
# Responders
# ---------------------------------------------------------------------------


class TestResponderFactory:
    def test_default_is_knowledge_base(self):
        assert isinstance(get_responder(), KnowledgeBaseResponder)

    def test_site_faq(self):
        assert isinstance(get_responder("site_faq"), SiteFAQResponder)

    def test_name_is_case_insensitive(self):
        assert isinstance(get_responder("Knowledge_Base"), KnowledgeBaseResponder)

    def test_singleton_cache(self):
        assert get_responder("site_faq") is get_responder("site_faq")

    def test_kwargs_bypass_cache(self):
        cached = get_responder("knowledge_base")
        custom = get_responder("knowledge_base", model="custom")
        assert custom is not cached
        assert custom.model == "custom"
        assert get_responder("knowledge_base") is cached

    def test_clear_cache(self):
        first = get_responder()
        clear_cache()
        assert get_responder() is not first

    def test_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown responder 'nope'"):
            get_responder("nope")

    def test_deepseek_without_key_raises(self, monkeypatch):
        monkeypatch.delenv("DEEPSEEK_API_KEY", raising=False)
        with pytest.raises(ValueError, match="DEEPSEEK_API_KEY"):
            get_responder("deepseek")

    def test_available(self):
        assert available_responders() == ["knowledge_base", "site_faq", "deepseek"]

    def test_available_split_by_locality(self):
        assert available_responders(remote=True) == ["deepseek"]
        assert available_responders(remote=False) == ["knowledge_base", "site_faq"]

    def test_remote_responder_is_never_cached(self, monkeypatch):
        monkeypatch.setenv("DEEPSEEK_API_KEY", "test-key")
        assert get_responder("deepseek") is not get_responder("deepseek")


class TestResponderFromSettings:
    def test_default_provider(self):
        responder = responder_from_settings(Settings())
        assert responder is get_responder("knowledge_base")

    def test_provider_override(self):
        assert isinstance(responder_from_settings(Settings(), "site_faq"), SiteFAQResponder)

    def test_remote_built_from_its_section(self, monkeypatch):
        monkeypatch.setenv("DEEPSEEK_API_KEY", "test-key")
        settings = Settings(
            responder={"provider": "deepseek"},
            deepseek={"model": "deepseek-reasoner", "base_url": "https://proxy.example.com/v1/"},
        )
        responder = responder_from_settings(settings)
        assert responder.model == "deepseek-reasoner"
        assert responder.base_url == "https://proxy.example.com/v1"

    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Available"):
            responder_from_settings(Settings(), "nope")


# ---------------------------------------------------------------------------
# Transports
# ---------------------------------------------------------------------------


class TestTransportFactory:
    def test_mock_returns_fresh_instances(self):
        make = transport_factory("mock", fail_connect=True)
        first, second = make(), make()
        assert isinstance(first, MockTransport)
        assert first is not second
        assert first.fail_connect is True

    def test_websocket(self):
        pytest.importorskip("websockets")
        transport = transport_factory("websocket", host="example.com", secure=True)()
        assert transport.url == "wss://example.com/ws"

    def test_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown transport 'carrier-pigeon'"):
            transport_factory("carrier-pigeon")

    def test_available(self):
        assert available_transports() == ["mock", "websocket"]
