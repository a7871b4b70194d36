"""
Brunel Engine — FastAPI backend.

Relays a guided interview to Claude and turns the finished transcript into a
structured report.

  POST /api/chat      Continue the interview: {messages} -> {response}
  POST /api/analyze   Generate the report:    {transcript} -> report JSON
  GET  /api/health    Configuration state:    {status, hasApiKey, model}

Every error body has the shape {"error": "<message>"}.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Load .env from repo root (two levels up from apps/api/)
_root = Path(__file__).resolve().parent.parent.parent
load_dotenv(_root / ".env")

from config import MAX_BODY_BYTES, MODEL_LABEL, get_cors_origins, get_listen_address, has_api_key
from llm.client import close_client, init_client

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# ── Lifespan: init/close model client ─────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    init_client()
    if has_api_key():
        logger.info("Model client initialized (%s)", MODEL_LABEL)
    else:
        logger.warning("ANTHROPIC_API_KEY not set — chat and analyze will fail")
    yield
    await close_client()
    logger.info("Model client closed")


app = FastAPI(title="Brunel Engine", lifespan=lifespan)

_TOO_LARGE = "Request body too large."


def _error(status: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": message}, headers=headers)


# ── Request size limit ────────────────────────────────────────────────────────
class BodySizeLimitMiddleware:
    """Reject bodies over ``max_bytes``, declared or actually received.

    Chunked bodies carry no Content-Length, so bytes are counted as the
    route reads them; going over raises a 413 HTTPException.
    """

    def __init__(self, app, max_bytes: int):
        self.app = app
        self.max_bytes = max_bytes

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = Request(scope).headers.get("content-length")
        if declared is not None and declared.isdigit() and int(declared) > self.max_bytes:
            await _error(413, _TOO_LARGE)(scope, receive, send)
            return

        received = 0

        async def limited_receive():
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_bytes:
                    raise HTTPException(status_code=413, detail=_TOO_LARGE)
            return message

        await self.app(scope, limited_receive, send)


app.add_middleware(BodySizeLimitMiddleware, max_bytes=MAX_BODY_BYTES)

# ── CORS (outermost middleware) ───────────────────────────────────────────────
from fastapi.middleware.cors import CORSMiddleware

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Error mapping: flat {"error": ...} bodies ────────────────────────────────
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 405:
        return _error(405, "Method not allowed", headers=exc.headers)
    message = exc.detail if isinstance(exc.detail, str) else "Request failed."
    return _error(exc.status_code, message, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Rejected request body on %s: %s", request.url.path, exc.errors())
    return _error(400, "Invalid request body.")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
    return _error(500, "Internal server error.")


# ── Routers ───────────────────────────────────────────────────────────────────
from routers import analyze, chat, health

app.include_router(chat.router, prefix="/api")
app.include_router(analyze.router, prefix="/api")
app.include_router(health.router, prefix="/api")


def run() -> None:
    import uvicorn

    host, port = get_listen_address()
    logger.info(
        "\n"
        "  ══════════════════════════════════════\n"
        "   THE BRUNEL ENGINE\n"
        "   Turn frustrations into insight\n"
        "  ══════════════════════════════════════\n\n"
        "   Running: http://localhost:%d\n"
        "   Model:   %s\n"
        "   API Key: %s\n",
        port,
        MODEL_LABEL,
        "Configured" if has_api_key() else "MISSING - add ANTHROPIC_API_KEY to .env",
    )
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
