"""Tests for CLI functionality."""
import json
import pytest
from click.testing import CliRunner
from committable.cli import main
from committable.config import DEFAULT_CONFIG_FILENAME

pytestmark = pytest.mark.usefixtures("clean_environment")

@pytest.fixture
def cli_runner():
    """Fixture for testing CLI commands."""
    return CliRunner()

@pytest.fixture
def run(cli_runner, tmp_path):
    """Invoke the CLI with the config directory pointed at tmp_path."""
    def _run(args=(), message=None):
        return cli_runner.invoke(main, ["--path", str(tmp_path), *args], input=message)
    return _run

def test_valid_message_from_stdin(run):
    result = run(["--no-color"], message="Fix bug\n\nExplain the fix.\n")
    assert result.exit_code == 0
    assert "No errors in commit message" in result.output

def test_invalid_message_from_stdin(run):
    result = run(["--no-color"], message="Fix bug\nDetails")
    assert result.exit_code == 1
    assert "1 error(s)" in result.output
    assert "there is not exactly one empty line before body" in result.output
    assert "Details" in result.output

def test_message_file_argument(run, tmp_path):
    """The commit-msg hook passes the message as a file path."""
    message_file = tmp_path / "COMMIT_EDITMSG"
    message_file.write_text("x" * 53 + "\n", encoding="utf-8")

    result = run(["--no-color", str(message_file)])
    assert result.exit_code == 1
    assert "header is too long" in result.output

def test_missing_message_file(run, tmp_path):
    result = run([str(tmp_path / "missing")])
    assert result.exit_code == 2

def test_json_output(run):
    result = run(["--format", "json"], message="x" * 53)
    assert result.exit_code == 1
    assert json.loads(result.output) == {
        "source": "x" * 53,
        "errors": [{"error_type": "header-too-long", "offset": 50, "length": 3}],
    }

def test_json_output_success(run):
    result = run(["--format", "json"], message="Fix bug")
    assert result.exit_code == 0
    assert json.loads(result.output) == {"source": "Fix bug", "errors": []}

def test_format_from_config(run, tmp_path):
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text('output_format = "json"\n')
    result = run(message="")
    assert result.exit_code == 1
    assert json.loads(result.output)["errors"][0]["error_type"] == "header-empty"

def test_json_output_stays_clean_with_config_warnings(run, tmp_path):
    """Config warnings go to stderr so stdout remains valid JSON."""
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text(
        'output_format = "json"\nlog_file = "../x.log"\n'
    )
    result = run(message="x" * 53)
    assert result.exit_code == 1
    assert json.loads(result.stdout)["errors"] == [
        {"error_type": "header-too-long", "offset": 50, "length": 3}
    ]
    assert "Unsafe log file path" in result.stderr

def test_stdin_is_default_source(run):
    result = run(["--format", "json"], message="Fix bug\n\nBody text\n")
    assert result.exit_code == 0
    assert json.loads(result.stdout)["source"] == "Fix bug\n\nBody text\n"

def test_quiet(run):
    result = run(["--quiet"], message="Fix bug")
    assert result.exit_code == 0
    assert result.output == ""

def test_verbose_logs_each_rule(run):
    result = run(["--verbose", "--no-color"], message="Fix bug")
    assert result.exit_code == 0
    for name in ["NonEmptyHeader", "NonEmptyBody", "SingleEmptyLineBeforeBody", "HeaderLength", "BodyLength"]:
        assert f"{name}: passed" in result.output

def test_log_file(run, tmp_path):
    log_file = tmp_path / "logs" / "check.log"
    result = run(["--log-file", str(log_file)], message="Fix bug\n\n\nDetails")
    assert result.exit_code == 1
    content = log_file.read_text()
    assert "SingleEmptyLineBeforeBody: failed (blank-line-separation at byte 8, length 1)" in content
    assert "Commit message failed with 1 error(s)" in content

def test_rev_reads_commit_message(cli_runner, temp_git_repo):
    result = cli_runner.invoke(main, ["--path", temp_git_repo, "--rev", "HEAD~1", "--no-color"])
    assert result.exit_code == 0
    assert "No errors in commit message" in result.output

    result = cli_runner.invoke(main, ["--path", temp_git_repo, "--rev", "HEAD", "--no-color"])
    assert result.exit_code == 1
    assert "without a blank line" in result.output

def test_unknown_rev(cli_runner, temp_git_repo):
    result = cli_runner.invoke(main, ["--path", temp_git_repo, "--rev", "does-not-exist"])
    assert result.exit_code == 1
    assert "Error:" in result.output

def test_config_list(run):
    result = run(["--config-list"])
    assert result.exit_code == 0
    assert "output_format" in result.output
    assert "Using default values" in result.output

def test_version(run):
    result = run(["--version"])
    assert result.exit_code == 0
    assert "committable" in result.output
