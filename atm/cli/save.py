"""CLI command for committing and pushing all changes in one step."""

import sys
from pathlib import Path

import click
import structlog

from atm.config.settings import CONFIG_FILENAME, AtmSettings
from atm.config.store import ConfigStore
from atm.enums import SaveOutcome
from atm.exceptions import AtmError, NoMessageError, NotInitializedError
from atm.git.gateway import GitGateway

log = structlog.get_logger(__name__)

# Marker git prints when a commit has no staged changes
NOTHING_TO_COMMIT = "nothing to commit"


def save_changes(
    directory: Path,
    git: GitGateway,
    message: str | None = None,
    config_filename: str = CONFIG_FILENAME,
) -> SaveOutcome:
    """Stage, commit and push every change in ``directory``.

    Args:
        directory: Working tree containing atm.json
        git: Gateway used for add, commit and push
        message: Commit message; falls back to defaultCommitMessage
        config_filename: Name of the configuration file

    Returns:
        SaveOutcome.PUSHED after a successful push, or
        SaveOutcome.NOTHING_TO_COMMIT when git had nothing to commit.

    Raises:
        NotInitializedError: atm.json is missing (no command is run)
        NoMessageError: No message given and none configured
        SubprocessFailureError: add, push, or commit (for any reason other
            than "nothing to commit") failed
    """
    store = ConfigStore(directory, config_filename)
    if not store.exists():
        raise NotInitializedError(str(directory))

    config = store.read()
    commit_message = message or config.default_commit_message
    if not commit_message or not commit_message.strip():
        raise NoMessageError()

    log.debug("save_started", directory=str(directory), message=commit_message)

    git.add(directory).raise_for_failure()

    commit = git.commit(directory, commit_message)
    if not commit.succeeded:
        if commit.diagnostic_text and NOTHING_TO_COMMIT in commit.diagnostic_text:
            log.info("nothing_to_commit", directory=str(directory))
            return SaveOutcome.NOTHING_TO_COMMIT
        commit.raise_for_failure()

    git.push(directory).raise_for_failure()
    log.info("save_pushed", directory=str(directory))
    return SaveOutcome.PUSHED


@click.command(name="s", context_settings={"ignore_unknown_options": True})
@click.argument("words", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def save_command(ctx: click.Context, words: tuple[str, ...]) -> None:
    """Commit all changes and push.

    With no WORDS the defaultCommitMessage from atm.json is used.

    Examples:

        # Quick save with the default message
        atm s

        # Commit with message "fix bug"
        atm s fix bug
    """
    settings: AtmSettings = ctx.obj["settings"] if ctx.obj else AtmSettings()
    message = " ".join(words) if words else None
    if message is not None and not message.strip():
        click.echo(click.style("Error: Commit message cannot be empty.", fg="red"), err=True)
        sys.exit(1)

    try:
        outcome = save_changes(
            Path.cwd(),
            GitGateway(),
            message=message,
            config_filename=settings.config_filename,
        )
        if outcome == SaveOutcome.NOTHING_TO_COMMIT:
            click.echo("Nothing to commit.")

    except AtmError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        log.debug("save_error", kind=str(e.kind), exc_info=True)
        sys.exit(1)

    except click.Abort:
        # click prints "Aborted!" and exits 1
        raise

    except KeyboardInterrupt:
        click.echo("\nInterrupted by user", err=True)
        sys.exit(130)

    except Exception as e:
        click.echo(click.style(f"Unexpected error: {e}", fg="red"), err=True)
        log.error("save_error_unexpected", exc_info=True)
        sys.exit(1)
