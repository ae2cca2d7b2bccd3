"""Transport factory: registry, lazy import.

Transports are per-connection, so there is no singleton cache here; the
factory hands back a zero-argument constructor for the feed to call on
every (re)connect.
"""

from __future__ import annotations

import functools
import importlib
import logging
from collections.abc import Callable

from manda.benchmarks.transport import Transport

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Transport registry: (transport_key, module_path, class_name)
# ---------------------------------------------------------------------------

_TRANSPORT_REGISTRY: list[tuple[str, str, str]] = [
    ("mock", "manda.benchmarks.transport", "MockTransport"),
    ("websocket", "manda.benchmarks.websocket_transport", "WebSocketTransport"),
]


def transport_factory(name: str = "mock", **kwargs) -> Callable[[], Transport]:
    """Return a constructor for the named transport.

    Args:
        name: ``mock`` or ``websocket``.
        **kwargs: Passed to the transport constructor on each call.
    """
    key = name.lower()
    for reg_key, module_path, cls_name in _TRANSPORT_REGISTRY:
        if reg_key == key:
            mod = importlib.import_module(module_path)
            cls = getattr(mod, cls_name)
            logger.debug("Resolved transport '%s'", key)
            return functools.partial(cls, **kwargs)

    available = [k for k, _, _ in _TRANSPORT_REGISTRY]
    raise ValueError(f"Unknown transport '{name}'. Available: {available}")


def available_transports() -> list[str]:
    """Return names of registered transports."""
    return [k for k, _, _ in _TRANSPORT_REGISTRY]
