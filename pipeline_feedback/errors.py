"""
Exceptions raised by the pipeline analysis.

Everything here is fatal for a run. Recoverable per-job conditions (a blank
trace, a completion without content) are logged and never raised.
"""


class PipelineFeedbackError(Exception):
    """Base class for errors that abort an analysis run."""


class ConfigurationError(PipelineFeedbackError):
    """Raised when required settings are missing or blank."""


class PipelineNotFoundError(PipelineFeedbackError):
    """Raised when the project has no pipeline to inspect."""


class TransportError(PipelineFeedbackError):
    """Raised when an HTTP call returns no body or cannot be completed."""

    def __init__(self, message, url=None, status_code=None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
