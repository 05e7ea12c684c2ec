import uuid

import structlog
from fastapi import APIRouter, Depends, HTTPException

from pipeline_feedback.agent.analyzer import PipelineAnalyzer
from pipeline_feedback.config import Settings, load_settings
from pipeline_feedback.errors import ConfigurationError, PipelineNotFoundError, TransportError
from .schemas import AnalyzeResponse, ErrorResponse

router = APIRouter()
log = structlog.get_logger(__name__)

_ERROR_STATUS = (
    (ConfigurationError, 500),
    (PipelineNotFoundError, 404),
    (TransportError, 502),
)


def get_settings() -> Settings:
    try:
        return load_settings()
    except ConfigurationError as e:
        log.error("settings.invalid", error=str(e))
        raise HTTPException(status_code=500, detail=str(e)) from e


@router.get("/health")
def health():
    return {"status": "ok"}


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
def analyze(settings: Settings = Depends(get_settings)):
    request_id = str(uuid.uuid4())
    try:
        result = PipelineAnalyzer(settings).analyze()
    except (ConfigurationError, PipelineNotFoundError, TransportError) as e:
        status_code = next(code for cls, code in _ERROR_STATUS if isinstance(e, cls))
        log.error("analysis.aborted", request_id=request_id, error=str(e), status_code=status_code)
        raise HTTPException(status_code=status_code, detail=str(e)) from e

    return AnalyzeResponse(
        request_id=request_id,
        status=result.status,
        report_markdown=result.report,
        failed_jobs=result.failed_jobs,
        analyzed_jobs=result.analyzed_jobs,
    )
