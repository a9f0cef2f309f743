"""Tests for atm/git/gateway.py."""

from unittest.mock import patch

from atm.enums import CommandStage
from atm.git.gateway import GitGateway


class TestGitGatewayCommands:
    """Tests for the mutating git commands."""

    def test_add(self, runner, tmp_path):
        GitGateway(runner).add(tmp_path)

        assert runner.calls[0].args == ("git", "add", ".")
        assert runner.calls[0].stage == CommandStage.ADD
        assert runner.calls[0].cwd == tmp_path

    def test_commit_captures_output(self, runner, tmp_path):
        """Should capture commit output so callers can inspect it."""
        GitGateway(runner).commit(tmp_path, "fix bug")

        call = runner.calls[0]
        assert call.args == ("git", "commit", "-m", "fix bug")
        assert call.stage == CommandStage.COMMIT
        assert call.stream is False

    def test_push_streams(self, runner, tmp_path):
        GitGateway(runner).push(tmp_path)

        assert runner.calls[0].args == ("git", "push")
        assert runner.calls[0].stream is True

    def test_init(self, runner, tmp_path):
        GitGateway(runner).init(tmp_path)

        assert runner.calls[0].args == ("git", "init", "-b", "main")
        assert runner.calls[0].stage == CommandStage.INIT

    def test_add_remote(self, runner, tmp_path):
        GitGateway(runner).add_remote(tmp_path, "https://github.com/octocat/notes.git")

        assert runner.calls[0].args == ("git", "remote", "add", "origin", "https://github.com/octocat/notes.git")
        assert runner.calls[0].stage == CommandStage.ADD_REMOTE

    def test_set_upstream_and_push(self, runner, tmp_path):
        GitGateway(runner).set_upstream_and_push(tmp_path, branch="trunk")

        call = runner.calls[0]
        assert call.args == ("git", "push", "-u", "origin", "trunk")
        assert call.stage == CommandStage.SET_UPSTREAM
        assert call.stream is True

    def test_failure_result_returned(self, runner, tmp_path):
        """Should leave failure handling to the caller."""
        runner.respond("git", "push", returncode=1, diagnostic="rejected")

        result = GitGateway(runner).push(tmp_path)

        assert result.succeeded is False
        assert result.diagnostic_text == "rejected"


class TestGitGatewayQueries:
    """Tests for repository queries delegated to GitDiscovery."""

    @patch("atm.git.gateway.GitDiscovery")
    def test_is_working_tree(self, mock_discovery, runner, tmp_path):
        mock_discovery.return_value.is_working_tree.return_value = True

        assert GitGateway(runner).is_working_tree(tmp_path) is True
        mock_discovery.assert_called_once_with(tmp_path)
        assert runner.calls == []

    @patch("atm.git.gateway.GitDiscovery")
    def test_get_remote_url(self, mock_discovery, runner, tmp_path):
        mock_discovery.return_value.get_remote_url.return_value = "git@github.com:octocat/notes.git"

        assert GitGateway(runner).get_remote_url(tmp_path) == "git@github.com:octocat/notes.git"
