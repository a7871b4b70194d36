"""Interview analysis report endpoint."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from config import ANALYSIS_MAX_TOKENS
from llm.client import ModelClient, get_client
from report.builder import build_analysis_messages
from report.parser import ExtractionError, extract_json
from report.prompts import ANALYSIS_SYSTEM_PROMPT
from schemas.analyze import AnalyzeRequest
from schemas.errors import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["report"])


def _error(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": message})


@router.post("/analyze", responses={500: {"model": ErrorResponse}})
async def analyze(body: AnalyzeRequest, model: ModelClient = Depends(get_client)):
    """Summarize the transcript into a structured report.

    The report shape comes from the prompt and is returned as the model
    produced it; only the JSON itself is recovered, nothing is validated.
    """
    try:
        text = await model.complete(
            system=ANALYSIS_SYSTEM_PROMPT,
            messages=build_analysis_messages(body.transcript),
            max_tokens=ANALYSIS_MAX_TOKENS,
        )
        report = extract_json(text)
        return JSONResponse(content=report)
    except ExtractionError as exc:
        logger.error("Raw response: %s", exc.raw_text)
        logger.error("Analysis error: %s", exc)
        return _error(500, "Failed to generate analysis.")
    except Exception:
        logger.exception("Analysis error")
        return _error(500, "Failed to generate analysis.")
