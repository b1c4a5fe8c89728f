"""Tests for the update and version CLI commands."""

import json
from unittest.mock import patch

import httpx
import pytest
from typer.testing import CliRunner

from prupdater import __version__
from prupdater.cli import app
from prupdater.cli.errors import ExitCode
from prupdater.core.updater.result import PRResult

runner = CliRunner()

ACTION_ENV = (
    "INPUT_GITHUB-TOKEN",
    "INPUT_BASE-BRANCH",
    "INPUT_REQUIRED-LABELS",
    "INPUT_REQUIRED-AUTOMERGE",
    "INPUT_AVOIDED-LABELS",
    "GITHUB_REPOSITORY",
    "GITHUB_API_URL",
    "GITHUB_OUTPUT",
    "GITHUB_STEP_SUMMARY",
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every command in an empty directory with no action variables."""
    for key in ACTION_ENV:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def action_inputs(isolated_env):
    isolated_env.setenv("INPUT_GITHUB-TOKEN", "test-token")
    isolated_env.setenv("INPUT_BASE-BRANCH", "main")
    isolated_env.setenv("GITHUB_REPOSITORY", "test-owner/test-repo")
    return isolated_env


class TestUpdateCommand:
    """Tests for `prupdater update`."""

    def test_success_from_inputs(self, action_inputs, make_pr):
        """Test a run configured only through action inputs."""
        result_value = PRResult(updated=(make_pr(1),), skipped=(make_pr(2),))

        with patch("prupdater.cli.update.update_pull_request", return_value=result_value) as run:
            result = runner.invoke(app, ["update"])

        assert result.exit_code == 0
        config = run.call_args.args[0]
        assert (config.owner, config.repo, config.base_branch) == ("test-owner", "test-repo", "main")
        assert "Pull requests updated: 1" in result.output
        assert "Pull requests skipped: 1" in result.output

    def test_options_override_inputs(self, action_inputs):
        """Test CLI options take precedence over inputs."""
        with patch("prupdater.cli.update.update_pull_request", return_value=PRResult()) as run:
            result = runner.invoke(
                app,
                [
                    "update",
                    "-b",
                    "develop",
                    "-r",
                    "octo/hello",
                    "--required-labels",
                    "ready, reviewed",
                    "--avoided-labels",
                    "wip",
                    "--required-automerge",
                ],
            )

        assert result.exit_code == 0
        config = run.call_args.args[0]
        assert config.base_branch == "develop"
        assert (config.owner, config.repo) == ("octo", "hello")
        assert config.required_labels == ("ready", "reviewed")
        assert config.avoided_labels == ("wip",)
        assert config.required_automerge is True
        assert config.github_token == "test-token"

    def test_json_output(self, action_inputs, make_pr):
        result_value = PRResult(updated=(make_pr(1),), failed=(make_pr(3),))

        with patch("prupdater.cli.update.update_pull_request", return_value=result_value):
            result = runner.invoke(app, ["update", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"updated": [1], "failed": [3], "skipped": []}

    def test_failed_prs_do_not_fail_the_run(self, action_inputs, make_pr):
        with patch(
            "prupdater.cli.update.update_pull_request",
            return_value=PRResult(failed=(make_pr(1),)),
        ):
            result = runner.invoke(app, ["update"])

        assert result.exit_code == 0
        assert "Pull requests failed: 1" in result.output

    def test_writes_summary_and_outputs(self, action_inputs, tmp_path, make_pr):
        """Test job summary and step outputs are written inside a workflow."""
        summary_file = tmp_path / "summary.md"
        output_file = tmp_path / "output"
        action_inputs.setenv("GITHUB_STEP_SUMMARY", str(summary_file))
        action_inputs.setenv("GITHUB_OUTPUT", str(output_file))

        with patch(
            "prupdater.cli.update.update_pull_request",
            return_value=PRResult(updated=(make_pr(1), make_pr(2))),
        ):
            result = runner.invoke(app, ["update"])

        assert result.exit_code == 0
        assert "## Pull Request Updates Summary (2)" in summary_file.read_text()
        outputs = output_file.read_text()
        assert "pull-requests-updated<<" in outputs
        assert "[1, 2]" in outputs

    def test_missing_token_is_user_error(self, isolated_env):
        """Test a missing input exits with code 2 before any remote call."""
        isolated_env.setenv("INPUT_BASE-BRANCH", "main")
        isolated_env.setenv("GITHUB_REPOSITORY", "o/r")

        with patch("prupdater.cli.update.update_pull_request") as run:
            result = runner.invoke(app, ["update"])

        assert result.exit_code == 2
        run.assert_not_called()
        assert "::error::Input required and not supplied: github-token" in result.output

    def test_invalid_repository_is_user_error(self, action_inputs):
        with patch("prupdater.cli.update.update_pull_request") as run:
            result = runner.invoke(app, ["update", "-r", "not-a-slug"])

        assert result.exit_code == 2
        run.assert_not_called()

    def test_listing_failure_is_general_error(self, action_inputs):
        """Test an error aborting the run exits with code 1."""
        request = httpx.Request("GET", "https://api.github.com/repos/test-owner/test-repo/pulls")
        error = httpx.HTTPStatusError(
            "Server error '500 Internal Server Error'",
            request=request,
            response=httpx.Response(500, request=request),
        )

        with patch("prupdater.cli.update.update_pull_request", side_effect=error):
            result = runner.invoke(app, ["update"])

        assert result.exit_code == 1
        assert "::error::Server error" in result.output
        assert "Run aborted" in result.output

    def test_unwritable_summary_is_general_error(self, action_inputs, tmp_path):
        """Test a job summary that cannot be written aborts with an annotation."""
        summary_dir = tmp_path / "summary"
        summary_dir.mkdir()
        action_inputs.setenv("GITHUB_STEP_SUMMARY", str(summary_dir))

        with patch("prupdater.cli.update.update_pull_request", return_value=PRResult()):
            result = runner.invoke(app, ["update"])

        assert result.exit_code == 1
        assert not isinstance(result.exception, OSError)
        assert "::error::" in result.output
        assert "Run aborted" in result.output

    def test_env_file_is_loaded(self, isolated_env, tmp_path):
        """Test inputs can come from a project .env file."""
        (tmp_path / ".env").write_text(
            "INPUT_GITHUB-TOKEN=file-token\nINPUT_BASE-BRANCH=main\nGITHUB_REPOSITORY=o/r\n"
        )
        for key in ("INPUT_GITHUB-TOKEN", "INPUT_BASE-BRANCH", "GITHUB_REPOSITORY"):
            # Registered so monkeypatch removes what the .env loader sets
            isolated_env.setenv(key, "")
            isolated_env.delenv(key)

        with patch("prupdater.cli.update.update_pull_request", return_value=PRResult()) as run:
            result = runner.invoke(app, ["update"])

        assert result.exit_code == 0
        assert run.call_args.args[0].github_token == "file-token"


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert f"prupdater version {__version__}" in result.output


def test_no_args_shows_help():
    result = runner.invoke(app, [])

    assert "update" in result.output


def test_exit_codes():
    """Test the exit codes the update command can produce."""
    assert {code.name: code.value for code in ExitCode} == {
        "SUCCESS": 0,
        "GENERAL_ERROR": 1,
        "USER_ERROR": 2,
    }
