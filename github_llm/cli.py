# github_llm/cli.py
"""
github-llm CLI 主入口
"""
import json

import click

from github_llm import __version__
from github_llm.core import client
from github_llm.core.config import CliConfig
from github_llm.core.context import build_context
from github_llm.core.errors import GithubLLMError, UsageError
from github_llm.core.models import PromptRequest, RunMode
from github_llm.core.payload import build_payload_for
from github_llm.core.renderer import render_rate_limits, render_response, render_token_help
from github_llm.utils.console import console, error, heading, plain, print_json, warning

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

EPILOG = """\b
Examples:
  github-llm -l ghp_...
  github-llm "Explain recursion" openai/gpt-4o ghp_...
  github-llm -f src/app.js "Refactor this" openai/gpt-4o ghp_...
  github-llm -d src "Summarize module" openai/gpt-4o ghp_...
  github-llm --rate openai/gpt-4o ghp_...
  github-llm token
"""


class GithubLLMCommand(click.Command):
    """Report every usage problem, click's own parse errors included, with exit code 1."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


# ------------------------------
# 各模式的处理函数
# ------------------------------

def _show_token_help(ctx: click.Context, config: CliConfig):
    plain(render_token_help(prog=ctx.command_path))


def _show_models(ctx: click.Context, config: CliConfig):
    print_json(client.list_models(config.token))


def _show_rate_limits(ctx: click.Context, config: CliConfig):
    tier = client.get_rate_tier(config.rate_model, config.token)
    if not tier:
        plain("Model not found or no rate tier info available.")
        ctx.exit(1)
    plain(render_rate_limits(config.rate_model, tier))


def _show_rest_usage(ctx: click.Context, config: CliConfig):
    usage = client.rest_rate_usage(config.token)
    if usage is None:
        warning("No core rate-limit information in the REST API response.")
        return
    print_json(usage)


def _show_raw_response(body: str):
    if not body.strip():
        return
    try:
        data = json.loads(body)
    except json.JSONDecodeError:
        plain(body)
        return
    print_json(data)


def _chat(ctx: click.Context, config: CliConfig):
    try:
        context = build_context(config.file, config.directory)
    except OSError as e:
        error(f"Failed to read context: {e}")
        ctx.exit(1)
    request = PromptRequest(prompt=config.prompt, model=config.model, context=context)
    payload = build_payload_for(request)

    heading("Payload to be sent:")
    print_json(payload)

    body = client.complete(payload, config.token)

    heading("Response from the API:")
    _show_raw_response(body)
    console.print()
    plain(render_response(body))


HANDLERS = {
    RunMode.TOKEN_HELP: _show_token_help,
    RunMode.LIST_MODELS: _show_models,
    RunMode.RATE: _show_rate_limits,
    RunMode.REST_USAGE: _show_rest_usage,
    RunMode.CHAT: _chat,
}


# ------------------------------
# CLI 主入口
# ------------------------------

@click.command(cls=GithubLLMCommand, context_settings=CONTEXT_SETTINGS, epilog=EPILOG)
@click.version_option(__version__, message="github-llm v%(version)s")
@click.option("-l", "--list-models", "list_models", is_flag=True,
              help="List all available models (requires <token> only)")
@click.option("-f", "file", metavar="FILE", help="Include one file as context")
@click.option("-d", "directory", metavar="DIR", help="Include all files directly under DIR as context")
@click.option("--rate", "rate_model", metavar="MODEL",
              help="Show rate limit tier and documented limits for a model")
@click.option("-u", "--rest-usage", "rest_usage", is_flag=True,
              help="Show core REST API rate-limit usage for the token")
@click.argument("args", nargs=-1, metavar="<prompt> <model> <token>")
@click.pass_context
def cli(ctx, list_models, file, directory, rate_model, rest_usage, args):
    """🤖 Send a prompt to a GitHub Models chat-completion model.

    <prompt> may span several words; the last two arguments are the model id
    (e.g. openai/gpt-4o) and a GitHub token with models:read. Run
    `github-llm token` for help getting one.
    """
    try:
        config = CliConfig.from_cli(
            args,
            list_models=list_models,
            file=file,
            directory=directory,
            rate_model=rate_model,
            rest_usage=rest_usage,
        )
    except UsageError as e:
        raise UsageError(e.message, ctx) from None

    try:
        HANDLERS[config.mode](ctx, config)
    except UsageError as e:
        raise UsageError(e.message, ctx) from None
    except GithubLLMError as e:
        error(str(e))
        ctx.exit(e.exit_code)


if __name__ == "__main__":
    cli()
