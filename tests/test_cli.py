"""
Tests for the bookshelf command line interface
"""

from unittest.mock import patch

from click.testing import CliRunner

from bookshelf import __version__
from bookshelf.cli import cli


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_export_schema_to_stdout():
    result = CliRunner().invoke(cli, ["export-schema"])

    assert result.exit_code == 0, result.output
    assert "type Query" in result.output
    assert "type Mutation" in result.output
    assert "addPublisher(name: String!): Publisher!" in result.output


def test_export_schema_to_file(tmp_path):
    output = tmp_path / "schema.graphql"

    result = CliRunner().invoke(cli, ["export-schema", "--output", str(output)])

    assert result.exit_code == 0, result.output
    assert "type Author" in output.read_text(encoding="utf-8")


def test_serve_passes_options_to_uvicorn():
    with patch("bookshelf.cli.uvicorn.run") as mock_run:
        result = CliRunner().invoke(cli, ["serve", "--port", "5001", "--host", "127.0.0.1"])

    assert result.exit_code == 0, result.output
    mock_run.assert_called_once()
    args, kwargs = mock_run.call_args
    assert args == ("bookshelf.api.app:build_default_app",)
    assert kwargs["factory"] is True
    assert kwargs["port"] == 5001
    assert kwargs["host"] == "127.0.0.1"


def test_serve_failure_exits_nonzero():
    with patch("bookshelf.cli.uvicorn.run", side_effect=RuntimeError("port in use")):
        result = CliRunner().invoke(cli, ["serve"])

    assert result.exit_code == 1
