"""Emilia's mood, inferred from the text of her replies."""

from __future__ import annotations

from enum import StrEnum


class Mood(StrEnum):
    NEUTRAL = "neutral"
    THINKING = "thinking"
    EXCITED = "excited"
    CONCERNED = "concerned"
    ANALYTICAL = "analytical"
    CREATIVE = "creative"
    HELPFUL = "helpful"


MOOD_TEXTS: dict[Mood, str] = {
    Mood.NEUTRAL: "I'm Emilia, your business valuation assistant",
    Mood.THINKING: "Analyzing your business data...",
    Mood.EXCITED: "I found something interesting!",
    Mood.CONCERNED: "I should point out a potential issue",
    Mood.ANALYTICAL: "Let me break down these numbers for you",
    Mood.CREATIVE: "I have an innovative suggestion",
    Mood.HELPFUL: "I'm happy to help you with that",
}

# First match wins
_MOOD_CUES: tuple[tuple[Mood, tuple[str, ...]], ...] = (
    (Mood.THINKING, ("analyzing", "processing", "thinking", "let me calculate")),
    (Mood.EXCITED, ("great news", "excellent", "congratulations", "impressive")),
    (Mood.CONCERNED, ("concern", "warning", "risk", "issue", "problem")),
    (
        Mood.ANALYTICAL,
        ("data shows", "analysis", "statistics", "figures", "percentage", "trend"),
    ),
    (Mood.CREATIVE, ("innovative", "creative", "idea", "suggest")),
    (Mood.HELPFUL, ("help", "assist", "support")),
)


def detect_mood(message: str) -> Mood:
    """Pick the mood matching the first cue found in ``message``."""
    lowered = message.lower()
    for mood, cues in _MOOD_CUES:
        if any(cue in lowered for cue in cues):
            return mood
    if lowered.startswith("i can"):
        return Mood.HELPFUL
    return Mood.NEUTRAL
