"""
Blocking HTTP primitives shared by the GitLab and LLM clients.

Single attempt, no timeout, no retry. An empty body is the only response
treated as a failure here; status codes are logged and the body is handed
back for the caller to interpret.
"""
from __future__ import annotations

import json
import ssl
from typing import Any

import certifi
import httpx
import structlog

from pipeline_feedback.errors import TransportError

log = structlog.get_logger(__name__)

_ssl_context = ssl.create_default_context(cafile=certifi.where())


def sanitize_text(value: str | bytes | None) -> str:
    """Return valid UTF-8 text, replacing undecodable bytes and lone surrogates."""
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value.encode("utf-8", errors="replace").decode("utf-8")


def _body(resp: httpx.Response, method: str, url: str) -> str:
    if resp.status_code >= 400:
        log.warning("http.error_status", method=method, url=url, status_code=resp.status_code)
    return sanitize_text(resp.content)


def api_get(url: str, token: str) -> str:
    headers = {"PRIVATE-TOKEN": token}
    try:
        resp = httpx.get(url, headers=headers, timeout=None, verify=_ssl_context)
    except httpx.HTTPError as exc:
        log.error("http.get_failed", url=url, error=str(exc))
        raise TransportError("API request failed!", url=url) from exc

    body = _body(resp, "GET", url)
    if not body:
        raise TransportError("API request failed!", url=url, status_code=resp.status_code)
    return body


def post_request(url: str, data: Any, api_key: str) -> str:
    payload = data if isinstance(data, str) else json.dumps(data)
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
    try:
        resp = httpx.post(url, content=payload.encode("utf-8"), headers=headers, timeout=None, verify=_ssl_context)
    except httpx.HTTPError as exc:
        log.error("http.post_failed", url=url, error=str(exc))
        raise TransportError(f"POST request to {url} failed!", url=url) from exc

    body = _body(resp, "POST", url)
    if not body:
        raise TransportError(f"POST request to {url} failed!", url=url, status_code=resp.status_code)
    return body
