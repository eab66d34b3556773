import json
from unittest.mock import patch

import pytest

from windowseat import __version__
from windowseat.cli.main import main
from windowseat.errors import BackendError


@pytest.fixture(autouse=True)
def no_user_config(tmp_path, monkeypatch):
    monkeypatch.setattr("windowseat.config.DEFAULT_CONFIG_PATH", tmp_path / "config.toml")


ROUTE = ["route", "--from", "DEL", "--to", "JAI", "--depart", "2025-08-01T18:00Z"]


def test_version(capsys):
    assert main(["--version"]) == 0
    assert __version__ in capsys.readouterr().out


def test_route_json(capsys):
    assert main(ROUTE + ["--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["ok"] is True
    assert payload["command"] == "route"
    assert payload["error"] is None
    data = payload["data"]
    assert set(data) == {"path", "sunPositions", "recommendation", "enhancedAnalysis"}
    assert len(data["path"]) >= 5


def test_route_text_with_duration(capsys):
    args = ["route", "--from", "del", "--to", "jai", "--depart", "2025-08-01T12:00Z", "--duration", "180"]
    assert main(args) == 0
    out = capsys.readouterr().out
    assert "Route: DEL → JAI" in out
    assert "sunset" in out


def test_unknown_airport_exit_code(capsys):
    args = ["route", "--from", "ZZZ", "--to", "DEL", "--depart", "2025-08-01T18:00Z", "--json"]
    assert main(args) == 2
    payload = json.loads(capsys.readouterr().out)
    assert payload["ok"] is False
    assert payload["error"]["code"] == "invalid_input"
    assert "ZZZ" in payload["error"]["message"]
    assert payload["error"]["details"] == {"codes": ["ZZZ", "DEL"]}


def test_identical_airports_exit_code(capsys):
    args = ["route", "--from", "DEL", "--to", "DEL", "--depart", "2025-08-01T18:00Z"]
    assert main(args) == 2
    assert capsys.readouterr().err


def test_bad_departure_exit_code(capsys):
    args = ["route", "--from", "DEL", "--to", "JAI", "--depart", "soon"]
    assert main(args) == 2


def test_backend_failure_exit_code(capsys):
    with patch("windowseat.cli.commands.analyze_route", side_effect=BackendError("boom")):
        assert main(ROUTE + ["--json"]) == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload["error"]["code"] == "route_failed"
    assert payload["error"]["message"] == "boom"


def test_missing_explicit_config_exit_code(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "missing.toml")] + ROUTE) == 1
    assert "Config file not found" in capsys.readouterr().err


def test_config_file_selects_backend(tmp_path, capsys):
    path = tmp_path / "windowseat.toml"
    path.write_text('[solar]\nbackend = "sundial"\n')
    assert main(["--config", str(path)] + ROUTE) == 1
    assert "Unknown solar backend" in capsys.readouterr().err


def test_malformed_config_is_a_route_failure(tmp_path, capsys):
    path = tmp_path / "windowseat.toml"
    path.write_text("[solar\n")
    assert main(["--config", str(path)] + ROUTE + ["--json"]) == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload["ok"] is False
    assert payload["error"]["code"] == "route_failed"


def test_unknown_classifier_is_a_route_failure(tmp_path, capsys):
    path = tmp_path / "windowseat.toml"
    path.write_text('[analysis]\nclassifier = "sundial"\n')
    assert main(["--config", str(path)] + ROUTE) == 1
    assert "Unknown sun condition classifier" in capsys.readouterr().err


@pytest.mark.parametrize("duration", ["inf", "nan", "1e12"])
def test_unbounded_duration_is_invalid_input(duration, capsys):
    assert main(ROUTE + ["--duration", duration, "--json"]) == 2
    payload = json.loads(capsys.readouterr().out)
    assert payload["error"]["code"] == "invalid_input"


def test_airports_json(capsys):
    assert main(["airports", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    codes = [a["code"] for a in payload["data"]]
    assert "DEL" in codes and "JAI" in codes
    assert codes == sorted(codes)


def test_doctor_ok(capsys):
    assert main(["doctor"]) == 0
    out = capsys.readouterr().out
    assert "solar_engine" in out
    assert "System ready." in out


def test_doctor_json_reports_bad_backend(tmp_path, capsys):
    path = tmp_path / "windowseat.toml"
    path.write_text('[solar]\nbackend = "sundial"\n')
    assert main(["--config", str(path), "doctor", "--json"]) == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload["data"]["checks"]["solar_engine"]["ok"] is False


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out
