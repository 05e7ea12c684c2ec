from pipeline_feedback.schemas.analysis import ChatMessage

failure_analysis_prompt = (
    "You are a DevOps and CI/CD expert providing concise and actionable feedback as a merge request comment. "
    "Format responses in a structured and readable way using Markdown. "
    "Focus on helping developers quickly understand the root cause of the failure and suggest a direct fix, "
    "without telling them to verify the fix. "
    "Use bullet points, code blocks, and **bold text** where necessary to improve readability. "
    "Keep responses short, relevant, and to the point. No follow-up steps or generic error messages."
)


def failed_job_prompt(job_name: str, log_tail: str) -> str:
    return (
        f"### Job: `{job_name}`\n\n"
        "**❌ Error Details:**\n"
        f"```plaintext\n{log_tail}\n```\n"
        "**🔍 Root Cause:**\n"
        "- Identify the most relevant error message.\n\n"
        "**🛠️ Suggested Fix:**\n"
        "```bash\n# Modify this line in your script\nexit 1  # 🔴 Remove or adjust this as needed\n```\n"
    )


def build_messages(job_name: str, log_tail: str) -> list[ChatMessage]:
    return [
        ChatMessage(role="system", content=failure_analysis_prompt),
        ChatMessage(role="user", content=failed_job_prompt(job_name, log_tail)),
    ]
