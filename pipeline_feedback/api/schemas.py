from typing import Literal

from pydantic import BaseModel, Field


class AnalyzeResponse(BaseModel):
    request_id: str
    status: Literal["success", "failure"]
    report_markdown: str = Field(..., examples=["No failed jobs found!"])
    failed_jobs: int = 0
    analyzed_jobs: int = 0


class ErrorResponse(BaseModel):
    detail: str
