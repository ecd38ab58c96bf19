# github_llm/core/models.py
"""
github-llm 核心数据结构。
这些对象在一次调用中构建、使用一次，随进程结束而丢弃。
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Any, List, Optional, Union

CONTEXT_ENCODING = "utf-8"


class ContextMode(Enum):
    """附加到提示词的上下文来源"""
    NONE = "none"
    FILE = "file"
    DIRECTORY = "directory"


class RunMode(Enum):
    """一次 CLI 调用执行的操作"""
    CHAT = "chat"
    LIST_MODELS = "list_models"
    RATE = "rate"
    REST_USAGE = "rest_usage"
    TOKEN_HELP = "token_help"


@dataclass(frozen=True)
class FileContext:
    """One regular file read from a context directory."""
    path: str
    content: str
    encoding: str = CONTEXT_ENCODING

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


# 单文件模式为纯文本，目录模式为记录列表
Context = Union[str, List[FileContext]]


@dataclass
class PromptRequest:
    prompt: str
    model: str
    context: Optional[Context] = None


@dataclass(frozen=True)
class ResponseSummary:
    """Fields pulled out of a chat-completion response, placeholders included."""
    message: str
    finish_reason: str
    completion_tokens: Any
    prompt_tokens: Any
    total_tokens: Any


@dataclass(frozen=True)
class RateTier:
    name: str
    requests_per_minute: str
    requests_per_day: str
    tokens_per_request: str
    concurrent_requests: str
