from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    hasApiKey: bool
    model: str
