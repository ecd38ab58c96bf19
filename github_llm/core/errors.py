# github_llm/core/errors.py
"""
github-llm 的异常层级。
CLI 捕获 GithubLLMError 并以退出码 1 结束本次调用。
"""

import click


class GithubLLMError(Exception):
    """Base class for every error the CLI reports and exits on."""
    exit_code = 1


class UsageError(GithubLLMError, click.UsageError):
    """Malformed invocation (conflicting flags, missing positionals)."""
    exit_code = 1

    def __init__(self, message: str, ctx=None):
        click.UsageError.__init__(self, message, ctx)


class MissingDependencyError(GithubLLMError):
    """A required third-party library is not installed."""


class NotFoundError(GithubLLMError):
    """A file or directory passed as context does not exist."""


class TransportError(GithubLLMError):
    """A catalog or REST call failed or returned something that is not JSON."""
