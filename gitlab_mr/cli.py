"""gitlab-mr command line interface.

Commands:
    create (c)        - push the branch and create or update its merge request
    publish           - same as ``create --publish``
    draft             - same as ``create --draft``
    file-change (fc)  - print the URL of a file's diff in the merge request
    target            - print the target branch of the merge request
    help              - show help for a command
"""

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import click

from gitlab_mr import __version__
from gitlab_mr.anchor import DiffAnchorLocator
from gitlab_mr.client import TOKEN_ENV_VAR, GitlabClient
from gitlab_mr.config import ConfigResolver, Configuration
from gitlab_mr.exceptions import ConfigurationError, GitlabMrError
from gitlab_mr.git import GitHelper
from gitlab_mr.logging import configure_logging
from gitlab_mr.output import Output
from gitlab_mr.prompts import DefaultsPrompter, Prompter, QuestionaryPrompter
from gitlab_mr.sync import MergeRequestSync

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

COMMAND_ALIASES = {
    "c": "create",
    "fc": "file-change",
}


@dataclass
class CliState:
    """Options shared by all commands."""

    force: bool = False
    debug: bool = False
    assume_defaults: bool = False


class AliasedGroup(click.Group):
    """Group that also accepts short command aliases."""

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, COMMAND_ALIASES.get(cmd_name, cmd_name))


def load_configuration() -> Configuration:
    config = ConfigResolver().resolve()
    if config is None:
        raise ConfigurationError("No configuration file was found!")
    return config


def make_prompter(assume_defaults: bool) -> Prompter:
    if assume_defaults or not sys.stdin.isatty():
        return DefaultsPrompter()
    return QuestionaryPrompter()


def build_sync(state: CliState) -> MergeRequestSync:
    config = load_configuration()
    return MergeRequestSync(
        config=config,
        git=GitHelper(),
        client=GitlabClient.from_config(config),
        prompter=make_prompter(state.assume_defaults),
    )


def run_action(ctx: click.Context, action: Callable[[CliState, Output], Any]) -> None:
    """Run a command body, turning errors into a message and exit status 1."""
    state: CliState = ctx.ensure_object(CliState)
    output = Output(debug_active=state.debug)
    if state.debug:
        configure_logging(level=logging.DEBUG)

    try:
        action(state, output)
    except GitlabMrError as e:
        output.exception(e)
        ctx.exit(EXIT_FAILURE)
    except (click.exceptions.Exit, click.ClickException, click.Abort):
        raise
    except Exception as e:
        output.exception(e)
        ctx.exit(EXIT_FAILURE)


def shared_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """--force and --debug are accepted before or after the command name."""
    func = click.option("-f", "--force", is_flag=True, default=False, help="Use force push.")(func)
    func = click.option("--debug", is_flag=True, default=False, help="Log API calls and git commands.")(func)
    return func


def merge_shared(ctx: click.Context, force: bool, debug: bool) -> CliState:
    state = ctx.ensure_object(CliState)
    state.force = state.force or force
    state.debug = state.debug or debug
    return state


@click.group(
    cls=AliasedGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=f"Environment: {TOKEN_ENV_VAR} - GitLab API token used when the "
    "configuration file has none.",
)
@shared_options
@click.option(
    "-y", "--yes", "assume_defaults", is_flag=True, default=False,
    help="Do not prompt; use configured defaults.",
)
@click.version_option(__version__, prog_name="gitlab-mr")
@click.pass_context
def cli(ctx: click.Context, force: bool, debug: bool, assume_defaults: bool) -> None:
    """Command line interface for GitLab merge request workflows."""
    ctx.obj = CliState(force=force, debug=debug, assume_defaults=assume_defaults)


def _synchronize(ctx: click.Context, draft: bool) -> None:
    def action(state: CliState, output: Output) -> None:
        sync = build_sync(state)
        with sync.client:
            handle = sync.synchronize(draft=draft, force=state.force)
        output.println("Merge request: " + handle.web_url)

    run_action(ctx, action)


@cli.command("create")
@click.option("--publish", "publish", is_flag=True, default=False, help="Mark the merge request as ready.")
@click.option("--draft", "draft", is_flag=True, default=False, help="Mark the merge request as draft.")
@shared_options
@click.pass_context
def create_command(ctx: click.Context, publish: bool, draft: bool, force: bool, debug: bool) -> None:
    """Upload new changes to the merge request.

    A remote branch is created if it does not exist. A merge request is
    created if it does not exist. The merge request is marked as draft with
    --draft and as ready otherwise.
    """
    merge_shared(ctx, force, debug)
    if publish and draft:
        Output().errorln("--publish and --draft are mutually exclusive")
        ctx.exit(EXIT_FAILURE)
    _synchronize(ctx, draft=draft)


@cli.command("publish")
@shared_options
@click.pass_context
def publish_command(ctx: click.Context, force: bool, debug: bool) -> None:
    """Upload new changes and mark the merge request as ready."""
    merge_shared(ctx, force, debug)
    _synchronize(ctx, draft=False)


@cli.command("draft")
@shared_options
@click.pass_context
def draft_command(ctx: click.Context, force: bool, debug: bool) -> None:
    """Upload new changes and mark the merge request as draft."""
    merge_shared(ctx, force, debug)
    _synchronize(ctx, draft=True)


@cli.command("file-change")
@click.argument("file_path", type=click.Path())
@shared_options
@click.pass_context
def file_change_command(ctx: click.Context, file_path: str, force: bool, debug: bool) -> None:
    """Print the URL of FILE_PATH's change in the open merge request."""
    merge_shared(ctx, force, debug)

    def action(state: CliState, output: Output) -> None:
        sync = build_sync(state)
        with sync.client:
            url = DiffAnchorLocator(sync.git, sync).locate(file_path)
        if url is None:
            output.errorln("No open merge request found for the current branch")
            return
        output.println(url)

    run_action(ctx, action)


@cli.command("target")
@shared_options
@click.pass_context
def target_command(ctx: click.Context, force: bool, debug: bool) -> None:
    """Print the target branch of the open merge request."""
    merge_shared(ctx, force, debug)

    def action(state: CliState, output: Output) -> None:
        sync = build_sync(state)
        with sync.client:
            target_branch = sync.target_branch()
        if target_branch:
            output.println(target_branch)

    run_action(ctx, action)


@cli.command("help")
@click.argument("command", required=False)
@click.pass_context
def help_command(ctx: click.Context, command: str | None) -> None:
    """Show help for the tool or for COMMAND."""
    group_ctx = ctx.parent
    if command is None:
        click.echo(group_ctx.get_help())
        return

    sub = cli.get_command(group_ctx, command)
    if sub is None:
        Output().errorln(f"Unknown command: {command}")
        ctx.exit(EXIT_FAILURE)
    with click.Context(sub, info_name=sub.name, parent=group_ctx) as sub_ctx:
        click.echo(sub.get_help(sub_ctx))


def main() -> None:
    cli(prog_name="gitlab-mr")
