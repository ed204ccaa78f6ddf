"""
Tests for the pokedex command line
"""

from unittest.mock import patch

from click.testing import CliRunner

from pokedex import __version__
from pokedex.cli import cli
from pokedex.config import settings


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_schema_prints_sdl():
    result = CliRunner().invoke(cli, ["schema"])

    assert result.exit_code == 0
    assert "type Query" in result.output
    assert "pokemonById(id: Int!): Pokemon" in result.output
    assert "enum AttackCategory" in result.output
    assert "maxCP: Int" in result.output


def test_serve_runs_uvicorn_with_port(monkeypatch):
    monkeypatch.setattr(settings, "api_port", settings.api_port)
    with patch("pokedex.cli.uvicorn.run") as mock_run:
        result = CliRunner().invoke(cli, ["serve", "--port", "4321"])

    assert result.exit_code == 0, result.output
    mock_run.assert_called_once()
    assert mock_run.call_args.kwargs["port"] == 4321


def test_serve_reload_uses_import_string(monkeypatch):
    monkeypatch.setattr(settings, "api_port", settings.api_port)
    with patch("pokedex.cli.uvicorn.run") as mock_run:
        result = CliRunner().invoke(cli, ["serve", "--reload"])

    assert result.exit_code == 0, result.output
    assert mock_run.call_args.args[0] == "pokedex.api.app:app"
