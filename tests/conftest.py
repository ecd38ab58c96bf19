# tests/conftest.py
"""
github-llm 测试共享 fixtures
"""

import json
from unittest.mock import MagicMock

import pytest


@pytest.fixture(scope="function")
def context_dir(tmp_path):
    """包含两个文本文件和一个子目录的上下文目录"""
    (tmp_path / "a.txt").write_text("alpha\n", encoding="utf-8")
    (tmp_path / "b.txt").write_text("beta\n", encoding="utf-8")
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "c.txt").write_text("gamma\n", encoding="utf-8")
    return tmp_path


@pytest.fixture(scope="function")
def sample_catalog():
    return [
        {"id": "openai/gpt-4o", "name": "OpenAI GPT-4o", "rate_limit_tier": "high"},
        {"id": "openai/gpt-4o-mini", "name": "OpenAI GPT-4o mini", "rate_limit_tier": "Low"},
        {"id": "openai/text-embedding-3-small", "rate_limit_tier": "embedding"},
        {"id": "custom/no-tier"},
    ]


@pytest.fixture(scope="function")
def sample_completion():
    return {
        "choices": [{
            "finish_reason": "stop",
            "index": 0,
            "message": {"content": "The capital of France is Paris.", "role": "assistant"},
        }],
        "model": "gpt-4o-mini-2024-07-18",
        "object": "chat.completion",
        "usage": {"completion_tokens": 8, "prompt_tokens": 13, "total_tokens": 21},
    }


def _make_response(data=None, text=None, status_code=200):
    resp = MagicMock()
    resp.status_code = status_code
    if text is None:
        text = json.dumps(data)
    resp.text = text
    if data is not None:
        resp.json.return_value = data
    else:
        resp.json.side_effect = ValueError("No JSON object could be decoded")
    return resp


@pytest.fixture(scope="function")
def make_response():
    """构造模拟 requests.Response 的工厂"""
    return _make_response
