"""Command-line entry point."""

import json

import pytest

from recipe_health.__main__ import main
from recipe_health.degradation import OFFLINE_SUMMARY


@pytest.mark.unit
def test_analyze_without_key_prints_stub(capsys):
    exit_code = main(["analyze", "2 slices bacon", "pasta"])

    out = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert out["analysis"]["summary"] == OFFLINE_SUMMARY


@pytest.mark.unit
def test_analyze_without_ingredients_fails(capsys):
    exit_code = main(["analyze", "  "])

    assert exit_code == 2
    assert "Ingredients are required" in capsys.readouterr().err


@pytest.mark.unit
def test_config_json_is_redacted(capsys, monkeypatch, mock_api_key):
    monkeypatch.setenv("GOOGLE_API_KEY", mock_api_key)
    monkeypatch.setenv("AI_MAX_RETRIES", "2")

    exit_code = main(["config", "--json"])

    raw = capsys.readouterr().out
    assert exit_code == 0
    assert mock_api_key not in raw
    info = json.loads(raw)
    assert info["config"]["api_key"] == "[SET]"
    assert info["config"]["max_retries"] == 2


@pytest.mark.unit
def test_config_human_readable(capsys):
    assert main(["config"]) == 0
    out = capsys.readouterr().out
    assert "Effective configuration:" in out
    assert "No API key configured" in out


@pytest.mark.unit
def test_invalid_configuration_exit_code(capsys, monkeypatch):
    monkeypatch.setenv("AI_REQUEST_TIMEOUT_MS", "soon")

    assert main(["config"]) == 2
    assert "configuration error" in capsys.readouterr().err


@pytest.mark.unit
def test_missing_env_file_exit_code(capsys, tmp_path):
    assert main(["--env-file", str(tmp_path / "nope.env"), "config"]) == 2
    assert "not found" in capsys.readouterr().err
