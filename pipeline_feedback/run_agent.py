import sys

import structlog
from dotenv import load_dotenv

from pipeline_feedback.agent.analyzer import PipelineAnalyzer
from pipeline_feedback.config import load_settings
from pipeline_feedback.errors import PipelineFeedbackError
from pipeline_feedback.logging_config import configure_logging

log = structlog.get_logger(__name__)


def main() -> int:
    """Analyze the latest pipeline; exit 1 when it has failed jobs or the run aborts."""
    load_dotenv()

    try:
        settings = load_settings()
        configure_logging(settings.APP_DEBUG)
        result = PipelineAnalyzer(settings).analyze()
    except PipelineFeedbackError as e:
        log.error("analysis.aborted", error=str(e), error_type=type(e).__name__)
        print(str(e), file=sys.stderr)
        return 1

    print(result.report)
    return 1 if result.failed else 0


if __name__ == "__main__":
    sys.exit(main())
