# github_llm/core/config.py
"""
单次调用的配置：在启动时从 CLI 参数构建并校验一次，之后只读。
所有互斥规则都集中在这里。
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from .context import context_mode_for
from .errors import UsageError
from .models import ContextMode, RunMode

TOKEN_HELP_ARG = "token"


@dataclass(frozen=True)
class CliConfig:
    mode: RunMode
    token: Optional[str] = None
    prompt: Optional[str] = None
    model: Optional[str] = None
    file: Optional[str] = None
    directory: Optional[str] = None
    rate_model: Optional[str] = None

    @property
    def context_mode(self) -> ContextMode:
        return context_mode_for(self.file, self.directory)

    @classmethod
    def from_cli(
        cls,
        args: Sequence[str],
        list_models: bool = False,
        file: Optional[str] = None,
        directory: Optional[str] = None,
        rate_model: Optional[str] = None,
        rest_usage: bool = False,
    ) -> "CliConfig":
        """
        Validate one invocation's flags and positionals.

        Raises UsageError for conflicting flags or missing positionals; nothing
        here touches the network or the filesystem.
        """
        args = list(args)
        has_context = bool(file or directory)
        query_flags = [flag for flag, on in (
            ("-l/--list-models", list_models),
            ("--rate", rate_model is not None),
            ("-u/--rest-usage", rest_usage),
        ) if on]

        if not query_flags and not has_context and args == [TOKEN_HELP_ARG]:
            return cls(mode=RunMode.TOKEN_HELP)

        context_mode_for(file, directory)

        if len(query_flags) > 1:
            raise UsageError(f"Options {', '.join(query_flags)} cannot be combined.")
        if query_flags and has_context:
            raise UsageError(f"-f/-d cannot be combined with {query_flags[0]}.")

        if list_models:
            if not args:
                raise UsageError("Token required for listing models.")
            return cls(mode=RunMode.LIST_MODELS, token=args[0])

        if rate_model is not None:
            if not rate_model:
                raise UsageError("--rate requires a model id.")
            if not args:
                raise UsageError("Token required for showing rate limits.")
            return cls(mode=RunMode.RATE, token=args[0], rate_model=rate_model)

        if rest_usage:
            if not args:
                raise UsageError("Token required for showing REST API usage.")
            return cls(mode=RunMode.REST_USAGE, token=args[0])

        if len(args) < 3:
            raise UsageError("A prompt, a model and a token are required.")

        return cls(
            mode=RunMode.CHAT,
            prompt=" ".join(args[:-2]),
            model=args[-2],
            token=args[-1],
            file=file,
            directory=directory,
        )
