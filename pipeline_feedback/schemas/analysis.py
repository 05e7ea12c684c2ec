from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user"]
    content: str


class AnalysisResult(BaseModel):
    status: Literal["success", "failure"]
    report: str
    failed_jobs: int = Field(0, description="failed jobs found in the pipeline")
    analyzed_jobs: int = Field(0, description="failed jobs that had a log and got a suggestion")

    @property
    def failed(self) -> bool:
        return self.status == "failure"
