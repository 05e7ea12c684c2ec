REPORT_HEADER = "## 🚨 Failing Pipeline detected"
DISCLAIMER_TEXT = "_Automatically generated with OpenAI. This is only a suggestion and can be wrong._"
NO_FAILED_JOBS_TEXT = "No failed jobs found!"


def tail_lines(text: str, limit: int = 100) -> str:
    """Last `limit` newline-separated lines of text, in order."""
    lines = text.split("\n")
    if limit > 0 and len(lines) > limit:
        lines = lines[-limit:]
    return "\n".join(lines)


def build_report(suggestions: list[str]) -> str:
    sections = "".join(f"\n{s}\n" for s in suggestions)
    return f"{REPORT_HEADER}\n{sections}\n{DISCLAIMER_TEXT}"
