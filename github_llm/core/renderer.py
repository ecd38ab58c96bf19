# github_llm/core/renderer.py
"""
响应渲染器：从 API 响应中提取已知字段并渲染为文本。
缺失的字段用占位符代替；格式错误的 JSON 不会导致中止。
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional

import jinja2

from .models import ResponseSummary
from .rate_limits import lookup_tier
from ..utils.console import warning

# 📁 模板目录（相对于当前文件）
TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

NO_MESSAGE = "No response."
UNKNOWN_REASON = "unknown"
NOT_AVAILABLE = "N/A"

TOKEN_DOCS_URL = "https://docs.github.com/en/github-models/use-github-models/prototyping-with-ai-models"


def _create_jinja_env() -> jinja2.Environment:
    loader = jinja2.FileSystemLoader(str(TEMPLATES_DIR))
    return jinja2.Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


_env = _create_jinja_env()


def _render(template_name: str, **context) -> str:
    return _env.get_template(template_name).render(**context).strip()


def parse_body(body: Optional[str]) -> Any:
    """Decode the raw body; empty or malformed input becomes an empty document."""
    if not body or not body.strip():
        warning("Empty response body.")
        return {}
    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        warning(f"Malformed JSON in response body: {e}")
        return {}


def _first_choice(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        return {}
    choices = data.get("choices")
    if isinstance(choices, list) and choices and isinstance(choices[0], dict):
        return choices[0]
    return {}


def _or_placeholder(value: Any, placeholder: Any) -> Any:
    # null 与缺失同样处理
    return placeholder if value is None else value


def extract_fields(body: Optional[str]) -> ResponseSummary:
    data = parse_body(body)
    choice = _first_choice(data)
    message = choice.get("message") if isinstance(choice.get("message"), dict) else {}
    usage = data.get("usage") if isinstance(data, dict) else None
    if not isinstance(usage, dict):
        usage = {}

    return ResponseSummary(
        message=_or_placeholder(message.get("content"), NO_MESSAGE),
        finish_reason=_or_placeholder(choice.get("finish_reason"), UNKNOWN_REASON),
        completion_tokens=_or_placeholder(usage.get("completion_tokens"), NOT_AVAILABLE),
        prompt_tokens=_or_placeholder(usage.get("prompt_tokens"), NOT_AVAILABLE),
        total_tokens=_or_placeholder(usage.get("total_tokens"), NOT_AVAILABLE),
    )


def render_response(body: Optional[str]) -> str:
    return _render("response.txt.j2", summary=extract_fields(body))


def render_rate_limits(model: str, tier_name: str) -> str:
    """Model, tier and the documented limits of that tier."""
    return _render(
        "rate_limits.txt.j2",
        model=model,
        tier_name=tier_name,
        tier=lookup_tier(tier_name),
    )


def render_token_help(prog: str = "this command") -> str:
    return _render(
        "token_help.txt.j2",
        permission="models:read",
        prog=prog,
        docs_url=TOKEN_DOCS_URL,
    )
