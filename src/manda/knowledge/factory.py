"""Responder registry and construction from settings.

Local responders (the keyword matchers) take no configuration and are shared
as singletons. Remote responders are built from their settings section on
every call, so a changed model or timeout is never hidden behind the cache.
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass

from manda.config import Settings
from manda.knowledge.base import Responder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResponderEntry:
    key: str
    module_path: str
    class_name: str
    remote: bool = False
    settings_section: str | None = None


# ---------------------------------------------------------------------------
# Responder registry
# ---------------------------------------------------------------------------

_RESPONDERS: tuple[ResponderEntry, ...] = (
    ResponderEntry("knowledge_base", "manda.knowledge.knowledge_base", "KnowledgeBaseResponder"),
    ResponderEntry("site_faq", "manda.knowledge.site_faq", "SiteFAQResponder"),
    ResponderEntry(
        "deepseek",
        "manda.knowledge.deepseek_provider",
        "DeepSeekResponder",
        remote=True,
        settings_section="deepseek",
    ),
)

_responder_cache: dict[str, Responder] = {}


def _entry(provider: str) -> ResponderEntry:
    key = provider.lower()
    for entry in _RESPONDERS:
        if entry.key == key:
            return entry
    raise ValueError(
        f"Unknown responder '{provider}'. Available: {available_responders()}"
    )


def get_responder(provider: str = "knowledge_base", **kwargs) -> Responder:
    """Get a responder by name.

    Local responders built without kwargs are cached; remote ones never are.

    Raises:
        ValueError: If the name is not registered, or a remote responder
            is missing its credentials.
    """
    entry = _entry(provider)
    cacheable = not kwargs and not entry.remote

    if cacheable and entry.key in _responder_cache:
        return _responder_cache[entry.key]

    cls = getattr(importlib.import_module(entry.module_path), entry.class_name)
    instance = cls(**kwargs)
    if cacheable:
        _responder_cache[entry.key] = instance
    logger.debug("Created %s responder '%s'", "remote" if entry.remote else "local", entry.key)
    return instance


def responder_from_settings(settings: Settings, provider: str | None = None) -> Responder:
    """Build the configured responder, passing its settings section as kwargs."""
    entry = _entry(provider or settings.responder.provider)
    kwargs = {}
    if entry.settings_section:
        kwargs = getattr(settings, entry.settings_section).model_dump()
    return get_responder(entry.key, **kwargs)


def available_responders(remote: bool | None = None) -> list[str]:
    """Names of registered responders, optionally only local or only remote."""
    return [e.key for e in _RESPONDERS if remote is None or e.remote is remote]


def clear_cache() -> None:
    _responder_cache.clear()
