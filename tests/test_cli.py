"""Tests for CLI functionality."""
import pytest
from pathlib import Path
from unittest.mock import patch
from click.testing import CliRunner
from gitcommitaudit.cli import main
from gitcommitaudit.config import Config
import os


@pytest.fixture
def cli_runner():
    """Fixture for testing CLI commands."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in (
        'GIT_COMMIT_AUDIT_THRESHOLD',
        'GIT_COMMIT_AUDIT_STRICT',
        'GIT_COMMIT_AUDIT_ALWAYS_LOG',
        'GIT_COMMIT_AUDIT_LOG_FILE',
    ):
        monkeypatch.delenv(name, raising=False)


def test_clean_repository_exits_zero(cli_runner, temp_git_repo):
    result = cli_runner.invoke(main, ['--path', str(temp_git_repo)])

    assert result.exit_code == 0
    assert "Commit messages are adequately executed." in result.output


def test_wip_commit_exits_one(cli_runner, wip_git_repo):
    result = cli_runner.invoke(main, ['--path', str(wip_git_repo)])

    assert result.exit_code == 1
    assert "Work-in-progress commit" in result.output
    assert "Error:" not in result.output


def test_quiet_prints_only_reports_with_issues(cli_runner, temp_git_repo, wip_git_repo):
    result = cli_runner.invoke(main, ['--quiet', '--path', str(temp_git_repo)])
    assert result.exit_code == 0
    assert result.output == ""

    result = cli_runner.invoke(main, ['-q', '-p', str(wip_git_repo)])
    assert result.exit_code == 1
    assert "Found 1 commits with issues" in result.output
    assert "Work-in-progress commit" in result.output


def test_limit_option(cli_runner, make_git_repo):
    repo_path = make_git_repo(
        "WIP: feat: add user authentication #123",
        "feat(auth): add OAuth2 login flow for users #123",
    )

    assert cli_runner.invoke(main, ['-p', str(repo_path), '-l', '1']).exit_code == 0
    assert cli_runner.invoke(main, ['-p', str(repo_path), '-l', '2']).exit_code == 1


def test_negative_limit_rejected(cli_runner, temp_git_repo):
    result = cli_runner.invoke(main, ['-p', str(temp_git_repo), '-l', '-1'])
    assert result.exit_code == 2


def test_threshold_with_error_severity(cli_runner, temp_git_repo):
    result = cli_runner.invoke(main, ['-p', str(temp_git_repo), '-t', '1000'])
    assert result.exit_code == 0

    result = cli_runner.invoke(
        main, ['-p', str(temp_git_repo), '-t', '1000', '--error', 'short']
    )
    assert result.exit_code == 1


def test_ignore_and_disable_options(cli_runner, wip_git_repo):
    assert cli_runner.invoke(main, ['-p', str(wip_git_repo), '--ignore', 'wip']).exit_code == 0
    assert cli_runner.invoke(main, ['-p', str(wip_git_repo), '--disable', 'wip']).exit_code == 0
    assert cli_runner.invoke(main, ['-p', str(wip_git_repo), '--warn', 'wip']).exit_code == 0


def test_strict_option(cli_runner, make_git_repo):
    repo_path = make_git_repo("Added the new login flow for users #13")

    assert cli_runner.invoke(main, ['-p', str(repo_path)]).exit_code == 0
    assert cli_runner.invoke(main, ['-p', str(repo_path), '--strict']).exit_code == 1


def test_unknown_validation_name(cli_runner, temp_git_repo):
    result = cli_runner.invoke(main, ['-p', str(temp_git_repo), '--error', 'spelling'])

    assert result.exit_code == 1
    assert "Error: Invalid validation name" in result.output


def test_invalid_path(cli_runner):
    """Test behavior with invalid repository path."""
    result = cli_runner.invoke(main, ['--path', '/nonexistent/path'])

    assert result.exit_code != 0
    assert "Error:" in result.output
    assert "does not exist" in result.output


def test_not_a_repository(cli_runner, tmp_path):
    result = cli_runner.invoke(main, ['--path', str(tmp_path)])

    assert result.exit_code != 0
    assert "is not a git repository" in result.output


def test_long_error_message_is_not_wrapped(cli_runner, tmp_path):
    repo_path = tmp_path / ("nested-directory-" * 6)
    repo_path.mkdir()

    result = cli_runner.invoke(main, ['--path', str(repo_path)])

    assert result.exit_code != 0
    assert f"Error: Path '{repo_path}' is not a git repository" in result.output


def test_log_file_option(cli_runner, wip_git_repo, tmp_path):
    log_file = tmp_path / "logs" / "audit.log"

    result = cli_runner.invoke(main, [
        '--log-file', str(log_file),
        '--path', str(wip_git_repo)
    ])

    assert result.exit_code == 1
    content = log_file.read_text()
    assert "failed format, wip" in content
    assert "Analysis failed: 1 of 2 commits with issues" in content


def test_keyboard_interrupt(cli_runner, temp_git_repo):
    """Test handling of KeyboardInterrupt."""
    with patch('gitcommitaudit.cli.analyze_commits', side_effect=KeyboardInterrupt()):
        result = cli_runner.invoke(main, ['--path', str(temp_git_repo)])

    assert "Operation cancelled by user" in result.output
    assert result.exit_code == 0


def test_general_exception(cli_runner, temp_git_repo):
    """Test handling of general exceptions."""
    with patch('gitcommitaudit.cli.analyze_commits', side_effect=Exception("Test error")):
        result = cli_runner.invoke(main, ['--path', str(temp_git_repo)])

    assert result.exit_code != 0
    assert "Error: Test error" in result.output


def test_branch_filter_skips_analysis(cli_runner, wip_git_repo):
    Config(branches=["release/*"]).save(wip_git_repo)

    result = cli_runner.invoke(main, ['--path', str(wip_git_repo)])

    assert result.exit_code == 0
    assert "Skipping analysis" in result.output


def test_branch_filter_matches(cli_runner, wip_git_repo):
    Config(branches=["*"]).save(wip_git_repo)

    result = cli_runner.invoke(main, ['--path', str(wip_git_repo)])

    assert result.exit_code == 1


def test_config_file_severity(cli_runner, wip_git_repo):
    (wip_git_repo / ".gitcommitaudit.toml").write_text('[severity]\nwip = "info"\n')

    assert cli_runner.invoke(main, ['--path', str(wip_git_repo)]).exit_code == 0


def test_config_dir_flag_creates_config(cli_runner, tmp_path):
    """Test that --config-dir creates a config file if it doesn't exist."""
    with patch('pyperclip.copy') as mock_copy:
        with cli_runner.isolated_filesystem(temp_dir=tmp_path) as td:
            config_path = Path(td) / ".gitcommitaudit.toml"
            assert not config_path.exists()

            result = cli_runner.invoke(main, ['--config-dir'])

            assert result.exit_code == 0
            assert config_path.exists()
            assert "Created new config file with default values" in result.output

            config = Config.load(Path(td))
            assert config.threshold is None
            assert config.strict is False
            assert config.always_log is False
            assert config.log_file is None

            mock_copy.assert_called_once_with(str(config_path))
            assert "Path copied to clipboard!" in result.output


def test_config_dir_flag_existing_config(cli_runner, tmp_path):
    """Test that --config-dir doesn't overwrite existing config."""
    with patch('pyperclip.copy') as mock_copy:
        with cli_runner.isolated_filesystem(temp_dir=tmp_path) as td:
            config_path = Path(td) / ".gitcommitaudit.toml"
            Config(threshold=45, strict=True).save(Path(td))

            result = cli_runner.invoke(main, ['--config-dir'])

            assert result.exit_code == 0
            loaded_config = Config.load(Path(td))
            assert loaded_config.threshold == 45
            assert loaded_config.strict is True
            assert "Created new config file" not in result.output
            mock_copy.assert_called_once_with(str(config_path))


def test_config_list_default_values(cli_runner, tmp_path):
    """Test --config-list with default values (no config file)."""
    with cli_runner.isolated_filesystem(temp_dir=tmp_path):
        result = cli_runner.invoke(main, ['--config-list'])

        assert result.exit_code == 0
        assert "Current Configuration Settings" in result.output
        assert "Using default values (no config file found)" in result.output

        settings = [line.strip() for line in result.output.splitlines() if line.strip()]
        assert any("threshold" in line and "30" in line and "default" in line for line in settings)
        assert any("strict" in line and "False" in line for line in settings)
        assert any(line.startswith("wip") and "error" in line and "True" in line for line in settings)
        assert any(line.startswith("reference") and "info" in line for line in settings)


def test_config_list_custom_values(cli_runner, tmp_path):
    """Test --config-list with custom values from config file."""
    repo_path = tmp_path / "custom" / "repo"
    repo_path.mkdir(parents=True)
    Config(threshold=50, disable=["vague"], severity={"wip": "warning"}).save(repo_path)

    result = cli_runner.invoke(main, ['--config-list', '--path', str(repo_path)])

    assert result.exit_code == 0
    assert "Config file:" in result.output
    config_path = str(repo_path / ".gitcommitaudit.toml").replace(os.sep, '/')
    normalized_output = ''.join(result.output.split())
    assert ''.join(config_path.split()) in normalized_output

    settings = [line.strip() for line in result.output.splitlines() if line.strip()]
    assert any("threshold" in line and "50" in line and "config" in line for line in settings)
    assert any(line.startswith("vague") and "False" in line for line in settings)
    assert any(line.startswith("wip") and "warning" in line for line in settings)


def test_config_list_applies_cli_overrides(cli_runner, tmp_path):
    result = cli_runner.invoke(main, [
        '--config-list', '--path', str(tmp_path), '--error', 'short', '-t', '12'
    ])

    settings = [line.strip() for line in result.output.splitlines() if line.strip()]
    assert any(line.startswith("threshold") and "12" in line for line in settings)
    assert any(line.startswith("short") and "error" in line for line in settings)


def test_version_flag(cli_runner):
    result = cli_runner.invoke(main, ['--version'])

    assert result.exit_code == 0
    assert "Version Information" in result.output
    assert "0.3.0" in result.output
