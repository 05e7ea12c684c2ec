"""
Shared pytest fixtures.

No test talks to GitLab or OpenAI: the transport functions are patched
where the clients import them, and a small router answers GitLab URLs
from in-memory data.
"""
import json
from unittest.mock import patch

import pytest

from pipeline_feedback.config import Settings

CI_API_V4_URL = "https://gitlab.example.com/api/v4"
PROJECT_URL = f"{CI_API_V4_URL}/projects/42"


def completion(content):
    """A chat completions response body carrying `content`."""
    return json.dumps({"choices": [{"message": {"role": "assistant", "content": content}}]})


@pytest.fixture()
def settings():
    return Settings(
        _env_file=None,
        GITLAB_API_TOKEN="glpat-test-token",
        CI_API_V4_URL=CI_API_V4_URL,
        CI_PROJECT_ID="42",
        OPENAI_API_KEY="sk-test-key",
    )


class FakeGitLab:
    """Answers the three GitLab endpoints from canned data and records every URL requested."""

    def __init__(self, pipelines=None, jobs=None, traces=None):
        self.pipelines = [{"id": 123}] if pipelines is None else pipelines
        self.jobs = [] if jobs is None else jobs
        self.traces = traces or {}
        self.urls = []

    def __call__(self, url, token):
        self.urls.append(url)
        if url == f"{PROJECT_URL}/pipelines?per_page=1":
            return json.dumps(self.pipelines)
        if url.startswith(f"{PROJECT_URL}/pipelines/") and url.endswith("/jobs"):
            return json.dumps(self.jobs)
        if url.startswith(f"{PROJECT_URL}/jobs/") and url.endswith("/trace"):
            job_id = url.split("/")[-2]
            return self.traces[job_id]
        raise AssertionError(f"unexpected GET {url}")

    @property
    def trace_urls(self):
        return [u for u in self.urls if u.endswith("/trace")]

    @property
    def job_list_urls(self):
        return [u for u in self.urls if u.endswith("/jobs")]


@pytest.fixture()
def gitlab_api():
    """Patch api_get with a FakeGitLab; tweak its attributes inside the test."""
    fake = FakeGitLab()
    with patch("pipeline_feedback.clients.gitlab_client.api_get", side_effect=fake) as mock:
        fake.mock = mock
        yield fake


@pytest.fixture()
def llm_api():
    """Patch post_request; set return_value or side_effect inside the test."""
    with patch("pipeline_feedback.clients.llm_client.post_request") as mock:
        mock.return_value = completion("Suggested Fix: Do X")
        yield mock
