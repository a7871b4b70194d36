from pydantic import BaseModel, ConfigDict


class ConversationTurn(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: str
    content: str


class ChatRequest(BaseModel):
    messages: list[ConversationTurn]


class ChatResponse(BaseModel):
    response: str
