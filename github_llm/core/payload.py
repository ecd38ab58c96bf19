# github_llm/core/payload.py
"""请求构建器：把提示词、模型和可选上下文合并成一个 JSON 请求对象。"""

import json
from typing import Dict, Any, Optional

from .context import serialize_context
from .models import Context, PromptRequest

# 本版本中这些参数不可配置
MAX_TOKENS = 1000
TEMPERATURE = 1.0
TOP_P = 1.0
STREAM = False


def build_message_content(prompt: str, context: Optional[Context] = None):
    if context is None:
        return prompt
    return [
        {"text": prompt, "type": "text"},
        {"text": serialize_context(context), "type": "text"},
    ]


def build_payload(prompt: str, model: str, context: Optional[Context] = None) -> Dict[str, Any]:
    """
    Build the chat-completion request body. The model identifier is passed
    through untouched; the API rejects unknown ones itself.
    """
    return {
        "messages": [{
            "role": "user",
            "content": build_message_content(prompt, context),
        }],
        "max_tokens": MAX_TOKENS,
        "temperature": TEMPERATURE,
        "top_p": TOP_P,
        "stream": STREAM,
        "model": model,
    }


def build_payload_for(request: PromptRequest) -> Dict[str, Any]:
    return build_payload(request.prompt, request.model, request.context)


def dump_payload(payload: Dict[str, Any]) -> str:
    """Compact wire form of the payload."""
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
