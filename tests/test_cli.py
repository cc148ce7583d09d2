"""Console interface: payload validation and serve wiring."""

import json

from expense_api import cli


def test_validate_accepts_good_payload(capsys):
    payload = json.dumps({"amount": 3, "description": "Tea", "category": "Drinks", "date": "2024-05-01"})

    assert cli.main(["validate", payload]) == 0
    assert capsys.readouterr().out.strip() == "valid"


def test_validate_reports_first_error(capsys):
    payload = json.dumps({"amount": 3, "description": " ", "category": "", "date": "x"})

    assert cli.main(["validate", payload]) == 1
    assert "'description' must be a non-empty string." in capsys.readouterr().err


def test_validate_rejects_malformed_json(capsys):
    assert cli.main(["validate", "{oops"]) == 1
    assert "Invalid or empty JSON body" in capsys.readouterr().err


def test_validate_rejects_empty_object(capsys):
    assert cli.main(["validate", "{}"]) == 1
    assert "Invalid or empty JSON body" in capsys.readouterr().err


def test_serve_builds_app_and_runs(monkeypatch):
    calls = {}

    def fake_run(self, host, port, debug):
        calls.update(host=host, port=port, debug=debug, count=self.extensions["expense_store"].count)

    monkeypatch.setattr("flask.Flask.run", fake_run)

    assert cli.main(["serve", "--port", "8080", "--no-seed"]) == 0
    assert calls == {"host": "127.0.0.1", "port": 8080, "debug": False, "count": 0}


def test_validate_treats_scalar_json_as_empty(capsys):
    assert cli.main(["validate", "5"]) == 1
    assert "Invalid or empty JSON body" in capsys.readouterr().err
