"""Conversion of interview turns into Messages API input."""

from __future__ import annotations

from typing import Iterable

from schemas.chat import ConversationTurn


def build_chat_messages(turns: Iterable[ConversationTurn]) -> list[dict]:
    """Map turns to ``{role, content}`` dicts, order preserved.

    Only ``assistant`` survives as-is; any other role is sent as ``user``.
    """
    return [
        {
            "role": "assistant" if t.role == "assistant" else "user",
            "content": t.content,
        }
        for t in turns
    ]
