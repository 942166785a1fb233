"""Unit tests for the command-line interface."""

import tempfile
from pathlib import Path

import pytest
from typer.testing import CliRunner

from gitempl.cli import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def out_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


TYPES_TEMPLATE = "{% for c in commits %}{{ c.cc.type }},{% endfor %}"


def test_render_stdin_to_stdout(runner, test_repo):
    """Test an inline template read from stdin and written to stdout."""
    result = runner.invoke(app, ["--dir", str(test_repo)], input=TYPES_TEMPLATE)

    assert result.exit_code == 0
    assert result.output == "chore,feat,fix,"


def test_render_template_file_to_output_file(runner, test_repo, out_dir):
    """Test a template file rendered into an output file."""
    template = out_dir / "changelog.md.j2"
    template.write_text(
        "{% for c in commits.keep_by_field('Type', 'feat') %}"
        "## {{ c.cc.description | title }}\n"
        "{{ c.stats | stats_html }}"
        "{% endfor %}",
        encoding="utf-8",
    )
    output = out_dir / "CHANGELOG.md"

    result = runner.invoke(app, [str(output), "-d", str(test_repo), "-t", str(template)])

    assert result.exit_code == 0
    assert result.output == ""
    text = output.read_text(encoding="utf-8")
    assert text.startswith("## Add main.py\n| File | Count | Diff |\n")
    assert "| [main.py](main.py) | **2** |" in text
    assert [p.name for p in out_dir.iterdir() if p.name.endswith(".tmp")] == []


def test_render_max_commits(runner, test_repo):
    """Test limiting the number of commits read."""
    result = runner.invoke(app, ["-d", str(test_repo), "-n", "2"], input=TYPES_TEMPLATE)

    assert result.exit_code == 0
    assert result.output == "feat,fix,"


def test_render_empty_repository(runner, empty_repo):
    result = runner.invoke(
        app,
        ["-d", str(empty_repo)],
        input="{{ commits | length }}",
    )

    assert result.exit_code == 0
    assert result.output == "0"


def test_invalid_repository(runner):
    """Test that a missing repository is a fatal error."""
    result = runner.invoke(app, ["--dir", "/nonexistent/path"], input=TYPES_TEMPLATE)

    assert result.exit_code == 1
    assert "Error" in result.output
    assert "Repository path does not exist" in result.output


def test_template_syntax_error_leaves_no_output_file(runner, test_repo, out_dir):
    """Test that a broken template fails without creating the output file."""
    output = out_dir / "out.md"

    result = runner.invoke(app, [str(output), "-d", str(test_repo)], input="{% for c in commits %}")

    assert result.exit_code == 1
    assert "Error" in result.output
    assert not output.exists()
    assert list(out_dir.iterdir()) == []


def test_missing_template_file(runner, test_repo):
    result = runner.invoke(app, ["-d", str(test_repo), "-t", "/nonexistent/template.j2"])

    assert result.exit_code == 1
    assert "Error" in result.output
