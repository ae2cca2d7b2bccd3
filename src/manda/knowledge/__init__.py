"""Knowledge responders — keyword FAQ matcher, site FAQ, DeepSeek."""

from manda.knowledge.base import Responder
from manda.knowledge.chat import ChatService, ChatSession
from manda.knowledge.factory import available_responders, get_responder, responder_from_settings
from manda.knowledge.persona import Mood, detect_mood
from manda.knowledge.schemas import ChatCompletion, ChatMessage, FAQEntry, Role

__all__ = [
    "ChatCompletion",
    "ChatMessage",
    "ChatService",
    "ChatSession",
    "FAQEntry",
    "Mood",
    "Responder",
    "Role",
    "available_responders",
    "detect_mood",
    "get_responder",
    "responder_from_settings",
]
