"""
Tests for the lienpilot command-line interface.
"""

import json

import pytest

from lienpilot.cli import main

from tests.conftest import make_answers


@pytest.fixture
def answers_file(tmp_path):
    path = tmp_path / "answers.json"
    path.write_text(json.dumps(make_answers()), encoding="utf-8")
    return path


class TestEvaluateCommand:
    """Tests for `lienpilot evaluate`."""

    def test_prints_result_json(self, answers_file, capsys):
        exit_code = main(["evaluate", str(answers_file), "--today", "2024-02-01"])
        assert exit_code == 0

        output = json.loads(capsys.readouterr().out)
        assert output["deadline"]["deadline_date"] == "2024-03-15"
        assert output["validity"]["level"] == "strong"
        assert output["evaluated_on"] == "2024-02-01"
        assert "schedule" not in output

    def test_schedule_flag(self, answers_file, capsys):
        exit_code = main(["evaluate", str(answers_file), "--today", "2024-02-01", "--schedule"])
        assert exit_code == 0

        output = json.loads(capsys.readouterr().out)
        titles = [d["title"] for d in output["schedule"]]
        assert "File Mechanics Lien" in titles

    def test_invalid_answers_exit_2(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"project_type": "commercial"}), encoding="utf-8")

        exit_code = main(["evaluate", str(path), "--today", "2024-02-01"])
        assert exit_code == 2

        err = capsys.readouterr().err
        assert "contract_party" in err
        assert "last_work_date" in err

    def test_partial_flag(self, tmp_path, capsys):
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"contract_party": "owner"}), encoding="utf-8")

        assert main(["evaluate", str(path), "--today", "2024-02-01", "--partial"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["deadline"]["deadline_date"] is None
        assert output["validity"] == {"level": "unknown"}

    def test_missing_file(self, tmp_path, capsys):
        assert main(["evaluate", str(tmp_path / "nope.json")]) == 1
        assert "Cannot read answers" in capsys.readouterr().err

    def test_bad_today(self, answers_file):
        with pytest.raises(SystemExit):
            main(["evaluate", str(answers_file), "--today", "02/01/2024"])


class TestRulesCommand:
    """Tests for `lienpilot rules`."""

    def test_prints_bundled_rules(self, capsys):
        assert main(["rules"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["id"] == "US-TX-PROPERTY-CODE-53"

    def test_bad_rules_path(self, tmp_path, capsys):
        assert main(["--rules", str(tmp_path / "missing.yaml"), "rules"]) == 1
        assert "LP_RULE_PACK_LOAD_ERROR" in capsys.readouterr().err

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
