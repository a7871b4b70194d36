from schemas.chat import ConversationTurn, ChatRequest, ChatResponse
from schemas.analyze import AnalyzeRequest
from schemas.health import HealthResponse
from schemas.errors import ErrorResponse
