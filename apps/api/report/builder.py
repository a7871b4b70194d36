"""Transcript formatting and prompt construction for analysis reports."""

from __future__ import annotations

from typing import Iterable

from report.prompts import ANALYSIS_USER_TEMPLATE
from schemas.chat import ConversationTurn


def _speaker(role: str) -> str:
    return "Interviewer" if role == "assistant" else "User"


def format_transcript(turns: Iterable[ConversationTurn]) -> str:
    """Render turns as ``Speaker: content`` blocks separated by blank lines."""
    return "\n\n".join(f"{_speaker(t.role)}: {t.content}" for t in turns)


def build_analysis_messages(turns: Iterable[ConversationTurn]) -> list[dict]:
    """Wrap the whole transcript into the single user message the report needs."""
    content = ANALYSIS_USER_TEMPLATE.format(transcript=format_transcript(turns))
    return [{"role": "user", "content": content}]
