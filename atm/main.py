"""CLI entry point for atm."""

from typing import NoReturn

import click
import structlog

from atm import __version__
from atm.cli.init import init_command
from atm.cli.save import save_command
from atm.config.settings import AtmSettings
from atm.exceptions import UnknownCommandError
from atm.utils.logging_config import configure_logging

log = structlog.get_logger(__name__)

SAVE_COMMAND = "s"
_SETTINGS_KEY = "atm.settings"


def _settings(ctx: click.Context) -> AtmSettings:
    """Load settings once per invocation and share them through ctx.meta."""
    if _SETTINGS_KEY not in ctx.meta:
        ctx.meta[_SETTINGS_KEY] = AtmSettings()
    settings: AtmSettings = ctx.meta[_SETTINGS_KEY]
    return settings


class AtmGroup(click.Group):
    """Command group with atm's handling of unrecognized commands.

    By default an unknown first argument, including one that looks like an
    option (``atm -x``), is rejected with a hint to use ``atm s <text>``.
    With ``ATM_IMPLICIT_SAVE=true`` the whole argument list is instead passed
    to the save command as the commit message.
    """

    def _is_unknown_option(self, ctx: click.Context, arg: str) -> bool:
        if not arg.startswith("-") or arg in ("-", "--"):
            return False
        known: set[str] = set()
        for param in self.get_params(ctx):
            if isinstance(param, click.Option):
                known.update(param.opts)
                known.update(param.secondary_opts)
        return arg.split("=", 1)[0] not in known

    def _reject(self, ctx: click.Context, cmd_name: str) -> NoReturn:
        error = UnknownCommandError(cmd_name)
        click.echo(click.style(f"Error: {error}", fg="red"), err=True)
        ctx.exit(1)

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        # The group parser would reject an unknown leading option itself
        if args and not ctx.resilient_parsing and self._is_unknown_option(ctx, args[0]):
            if not _settings(ctx).implicit_save:
                self._reject(ctx, args[0])
            log.debug("implicit_save", words=len(args))
            args = [SAVE_COMMAND, *args]

        return super().parse_args(ctx, args)

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        cmd_name = args[0]
        if self.get_command(ctx, cmd_name) is None and not ctx.resilient_parsing:
            save = self.get_command(ctx, SAVE_COMMAND)
            if save is not None and _settings(ctx).implicit_save:
                log.debug("implicit_save", words=len(args))
                return SAVE_COMMAND, save, args

            self._reject(ctx, cmd_name)

        return super().resolve_command(ctx, args)


@click.group(
    cls=AtmGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, "-v", "--version", prog_name="atm", message="%(prog)s %(version)s")
@click.option("--log-level", default=None, help="Logging level (default: WARNING, or ATM_LOG_LEVEL)")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """atm - Set up private GitHub repos and push commits quickly.

    \b
    Examples:
      atm init              Create a new private GitHub repo
      atm init ~/code/notes Create the repo in ~/code/notes
      atm s                 Quick save (commit + push)
      atm s fix bug         Commit with message "fix bug" + push
    """
    settings = _settings(ctx)
    configure_logging(log_level or settings.log_level)
    ctx.obj = {"settings": settings}

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(init_command)
cli.add_command(save_command)


if __name__ == "__main__":  # pragma: no cover
    cli()
