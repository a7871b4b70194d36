from pydantic import BaseModel

from schemas.chat import ConversationTurn


class AnalyzeRequest(BaseModel):
    transcript: list[ConversationTurn]
