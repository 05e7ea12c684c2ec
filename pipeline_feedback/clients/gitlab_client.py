from __future__ import annotations
import json
import structlog

from pipeline_feedback.clients.http_transport import api_get, sanitize_text
from pipeline_feedback.config import Settings
from pipeline_feedback.errors import PipelineNotFoundError, TransportError
from pipeline_feedback.schemas.pipeline import Job, Pipeline

log = structlog.get_logger(__name__)


def _text(value) -> str:
    return sanitize_text(None if value is None else str(value))


class GitLabClient:
    def __init__(self, settings: Settings):
        self._base_url = settings.api_base_url
        self._project_id = settings.CI_PROJECT_ID
        self._token = settings.GITLAB_API_TOKEN.get_secret_value()

    @property
    def project_url(self) -> str:
        return f"{self._base_url}/projects/{self._project_id}"

    def _get_json(self, url: str):
        body = api_get(url, self._token)
        try:
            return json.loads(body)
        except ValueError as exc:
            raise TransportError(f"Invalid JSON returned by {url}", url=url) from exc

    def latest_pipeline(self) -> Pipeline:
        """
        Most recent pipeline of the project. Relies on the API listing newest first;
        no explicit ordering is requested.
        """
        pipelines = self._get_json(f"{self.project_url}/pipelines?per_page=1")
        if not isinstance(pipelines, list) or not pipelines:
            raise PipelineNotFoundError("❌ No pipeline found!")
        first = pipelines[0]
        if not isinstance(first, dict) or first.get("id") is None:
            raise PipelineNotFoundError("❌ No pipeline found!")
        return Pipeline(id=first["id"])

    def latest_pipeline_id(self) -> int | str:
        return self.latest_pipeline().id

    def list_jobs(self, pipeline_id: int | str) -> list[Job]:
        url = f"{self.project_url}/pipelines/{pipeline_id}/jobs"
        jobs = self._get_json(url)
        if not isinstance(jobs, list):
            raise TransportError(f"Unexpected jobs response from {url}", url=url)
        return [
            Job(id=j["id"], name=_text(j.get("name")), status=_text(j.get("status")))
            for j in jobs
            if isinstance(j, dict) and j.get("id") is not None
        ]

    def failed_jobs(self, pipeline_id: int | str) -> list[Job]:
        return [job for job in self.list_jobs(pipeline_id) if job.failed]

    def get_job_trace(self, job_id: int | str) -> str:
        return api_get(f"{self.project_url}/jobs/{job_id}/trace", self._token)
