"""CLI smoke tests."""

from click.testing import CliRunner
from type_schema_resolver.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate-config" in result.output
    assert "resolve" in result.output


def test_resolve_help_lists_options() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["resolve", "--help"])

    assert result.exit_code == 0
    for option in ("--config", "--model", "--format", "--output"):
        assert option in result.output
