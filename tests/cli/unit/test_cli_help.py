"""CLI smoke tests."""

from click.testing import CliRunner
from schema_typegen.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate-config" in result.output
    assert "generate" in result.output


def test_generate_help_lists_generation_flags() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["generate", "--help"])

    assert result.exit_code == 0
    assert "--intersection-types / --union-types" in result.output
    assert "--legacy-singular / --array-directory" in result.output
    assert "--required-non-null / --required-nullable" in result.output
