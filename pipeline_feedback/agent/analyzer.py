from __future__ import annotations
import structlog

from pipeline_feedback.agent.report import NO_FAILED_JOBS_TEXT, build_report, tail_lines
from pipeline_feedback.clients.gitlab_client import GitLabClient
from pipeline_feedback.clients.llm_client import LLMClient
from pipeline_feedback.config import Settings
from pipeline_feedback.schemas.analysis import AnalysisResult
from pipeline_feedback.schemas.pipeline import Job
from pipeline_feedback.utils.prompts import build_messages

log = structlog.get_logger(__name__)


class PipelineAnalyzer:
    """
    Looks at the latest pipeline of the configured project and asks the LLM
    for a fix suggestion for every failed job.

    One instance serves one run. Jobs are handled one after another in the
    order GitLab lists them, so the report sections follow that order.
    """

    def __init__(
        self,
        settings: Settings,
        gitlab: GitLabClient | None = None,
        llm: LLMClient | None = None,
    ):
        # Fail before any client touches the network.
        settings.ensure_required()
        self.settings = settings
        self._gitlab = gitlab or GitLabClient(settings)
        self._llm = llm or LLMClient(settings)

    def analyze(self) -> AnalysisResult:
        pipeline_id = self._gitlab.latest_pipeline_id()
        log.info("pipeline.checking", pipeline_id=pipeline_id)

        failed_jobs = self._gitlab.failed_jobs(pipeline_id)
        if not failed_jobs:
            log.info("pipeline.no_failed_jobs", pipeline_id=pipeline_id)
            return AnalysisResult(status="success", report=NO_FAILED_JOBS_TEXT)

        log.info("pipeline.failed_jobs", pipeline_id=pipeline_id, count=len(failed_jobs))

        suggestions: list[str] = []
        for job in failed_jobs:
            suggestion = self.analyze_job(job)
            if suggestion is not None:
                suggestions.append(suggestion)

        return AnalysisResult(
            status="failure",
            report=build_report(suggestions),
            failed_jobs=len(failed_jobs),
            analyzed_jobs=len(suggestions),
        )

    def analyze_job(self, job: Job) -> str | None:
        """
        Suggestion for one failed job, or None when its log is only whitespace.
        A trace with an empty HTTP body raises TransportError from api_get and halts the run.
        """
        log.info("job.downloading_log", job_id=job.id, job_name=job.name)
        trace = self._gitlab.get_job_trace(job.id)
        if not trace.strip():
            log.warning("job.no_log", job_id=job.id, job_name=job.name)
            return None

        log_tail = tail_lines(trace, self.settings.LOG_TAIL_LINES)
        suggestion = self._llm.suggest_fix(build_messages(job.name, log_tail))
        log.info("job.suggestion_received", job_id=job.id, job_name=job.name)
        return suggestion
