"""CLI command for initializing atm in a directory."""

import sys
from pathlib import Path

import click
import structlog

from atm.config.settings import AtmSettings
from atm.config.store import DEFAULT_COMMIT_MESSAGE, AtmConfig, ConfigStore
from atm.enums import HostType, InitOutcome
from atm.exceptions import (
    AlreadyInitializedError,
    AtmError,
    MissingInputError,
    NotAuthenticatedError,
    ToolMissingError,
    UnsupportedHostError,
)
from atm.git.gateway import GitGateway
from atm.git.models import RemoteInfo
from atm.git.parser import parse_remote_url
from atm.providers.github_cli import GH_INSTALL_URL, GH_LOGIN_COMMAND, GitHubCli
from atm.utils.command import CommandRunner
from atm.utils.prompt import ClickPrompter, Prompter, ask_with_default, is_affirmative

log = structlog.get_logger(__name__)

SUPPORTED_HOST = HostType.GITHUB
INITIAL_COMMIT_MESSAGE = "initial commit"
README_FILENAME = "README.md"


@click.command(name="init")
@click.argument("path", required=False)
@click.pass_context
def init_command(ctx: click.Context, path: str | None) -> None:
    """Create a private GitHub repo, or adopt the current one.

    PATH is created if missing and its name becomes the default repository
    name. Inside an existing Git working tree, only atm.json is written.

    Examples:

        # Create a repo, prompting for name and directory
        atm init

        # Create ~/code/notes and a repo named "notes"
        atm init ~/code/notes
    """
    settings: AtmSettings = ctx.obj["settings"] if ctx.obj else AtmSettings()
    try:
        runner = CommandRunner()
        initializer = RepoInitializer(
            target_path=path,
            git=GitGateway(runner),
            hosting=GitHubCli(runner),
            prompter=ClickPrompter(),
            settings=settings,
        )
        initializer.run()

    except AtmError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        log.debug("init_error", kind=str(e.kind), exc_info=True)
        sys.exit(1)

    except click.Abort:
        # Ctrl-C or EOF at a prompt; click prints "Aborted!" and exits 1
        raise

    except KeyboardInterrupt:
        click.echo("\nInterrupted by user", err=True)
        sys.exit(130)

    except Exception as e:
        click.echo(click.style(f"Unexpected error: {e}", fg="red"), err=True)
        log.error("init_error_unexpected", exc_info=True)
        sys.exit(1)


class RepoInitializer:
    """Handles the repository initialization workflow.

    The flow has two paths. Inside an existing working tree it only offers to
    write atm.json (after refusing non-GitHub remotes). Anywhere else it
    creates a private GitHub repository, a local repository wired to it, an
    initial commit, and pushes.

    Every command runs in an explicit directory; the process working
    directory is never changed.

    Attributes:
        target_path: Optional PATH argument as typed by the user
        base_dir: Directory the command was invoked from
        location: Resolved repository location (set by run())
        default_repo_name: Base name of PATH when one was given
    """

    def __init__(
        self,
        target_path: str | None,
        git: GitGateway,
        hosting: GitHubCli,
        prompter: Prompter,
        settings: AtmSettings | None = None,
        base_dir: Path | None = None,
    ) -> None:
        self.target_path = target_path
        self.git = git
        self.hosting = hosting
        self.prompter = prompter
        self.settings = settings or AtmSettings()
        self.base_dir = (base_dir or Path.cwd()).resolve()

        self.location: Path = self.base_dir
        self.default_repo_name: str | None = None

    def run(self) -> InitOutcome:
        """Run the initialization workflow.

        Returns:
            InitOutcome.DONE after a successful setup or adoption,
            InitOutcome.ABORTED when the user declines adoption.

        Raises:
            AlreadyInitializedError: atm.json already exists
            UnsupportedHostError: Existing remote is not on GitHub
            ToolMissingError: gh is not installed
            NotAuthenticatedError: gh is not logged in
            MissingInputError: A required answer was empty
            SubprocessFailureError: A git or gh command failed
        """
        self._resolve_target()

        store = ConfigStore(self.location, self.settings.config_filename)
        if store.exists():
            raise AlreadyInitializedError(str(self.location))

        if self.git.is_working_tree(self.location):
            return self._adopt_existing(store)

        return self._fresh_setup()

    def _resolve_target(self) -> None:
        """Resolve and create the PATH argument, if one was given."""
        if not self.target_path:
            return

        target = Path(self.target_path).expanduser()
        if not target.is_absolute():
            target = self.base_dir / target
        target = target.resolve()

        target.mkdir(parents=True, exist_ok=True)
        log.debug("target_resolved", path=str(target))

        self.location = target
        self.default_repo_name = target.name

    def _adopt_existing(self, store: ConfigStore) -> InitOutcome:
        click.echo(f"\nGit repository detected in: {self.location}")

        remote_url = self.git.get_remote_url(self.location)
        if remote_url:
            click.echo(f"\nRemote URL: {remote_url}")

            repo_info = parse_remote_url(remote_url)
            if repo_info:
                log.debug("remote_parsed", repo=repo_info.full_name, host_type=str(repo_info.host_type))
                if repo_info.host_type != SUPPORTED_HOST:
                    raise UnsupportedHostError(repo_info.host, repo_info.host_type)

                click.echo(f"Host: {repo_info.host_type}")
                self._show_visibility(repo_info)
        else:
            click.echo("\nNo remote configured.")

        click.echo("\nThis will only create an atm.json file. No new repository will be created.")

        answer = self.prompter.ask("\nCreate atm.json in this directory? [y/N]: ")
        if not is_affirmative(answer):
            click.echo("\nAborted. No changes made.")
            return InitOutcome.ABORTED

        store.write(AtmConfig(default_commit_message=DEFAULT_COMMIT_MESSAGE))
        click.echo("\natm.json created successfully.")
        click.echo("You can now use 'atm s' to save and push changes.")
        return InitOutcome.DONE

    def _show_visibility(self, repo_info: RemoteInfo) -> None:
        if not (self.hosting.is_installed(self.location) and self.hosting.is_authenticated(self.location)):
            return

        visibility = self.hosting.get_visibility(self.location, repo_info.owner, repo_info.repo)
        if visibility:
            click.echo(f"Visibility: {visibility}")

    def _fresh_setup(self) -> InitOutcome:
        if not self.hosting.is_installed(self.location):
            raise ToolMissingError("gh", GH_INSTALL_URL)

        if not self.hosting.is_authenticated(self.location):
            raise NotAuthenticatedError("gh", GH_LOGIN_COMMAND)

        username, repo_name, destination = self._collect_answers()

        click.echo(f"\nCreating private repo {username}/{repo_name}...")
        self.hosting.create_private_repo(self.location, username, repo_name).raise_for_failure()

        destination.mkdir(parents=True, exist_ok=True)

        click.echo("Initializing git...")
        self.git.init(destination, branch=self.settings.default_branch).raise_for_failure()

        (destination / README_FILENAME).write_text(f"# {repo_name}\n", encoding="utf-8")
        ConfigStore(destination, self.settings.config_filename).write(
            AtmConfig(default_commit_message=DEFAULT_COMMIT_MESSAGE)
        )

        self.git.add(destination).raise_for_failure()
        self.git.commit(destination, INITIAL_COMMIT_MESSAGE).raise_for_failure()

        self.git.add_remote(destination, self.hosting.remote_url(username, repo_name)).raise_for_failure()
        click.echo("Pushing to GitHub...")
        self.git.set_upstream_and_push(destination, branch=self.settings.default_branch).raise_for_failure()

        log.info("repository_initialized", path=str(destination), repo=f"{username}/{repo_name}")
        self._print_next_steps(destination)
        return InitOutcome.DONE

    def _collect_answers(self) -> tuple[str, str, Path]:
        """Prompt for username, repository name and, if needed, directory."""
        detected_username = self.hosting.current_username(self.location)
        username = ask_with_default(self.prompter, "GitHub username", detected_username)
        if not username:
            raise MissingInputError("Username")

        repo_name = ask_with_default(self.prompter, "Repository name", self.default_repo_name)
        if not repo_name:
            raise MissingInputError("Repository name")

        # PATH already fixed the destination
        if self.target_path:
            return username, repo_name, self.location

        directory = ask_with_default(self.prompter, "Directory", f"./{repo_name}") or f"./{repo_name}"
        destination = (self.base_dir / Path(directory).expanduser()).resolve()
        return username, repo_name, destination

    def _print_next_steps(self, destination: Path) -> None:
        click.echo(click.style(f"\nDone! Repository created at {destination}", fg="green"))
        click.echo()
        click.echo("Next steps:")
        click.echo(f"  1. Go to {destination}")
        click.echo("  2. Make changes")
        click.echo("  3. Run 'atm s' to push the changes to GitHub")
