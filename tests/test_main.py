"""
Tests for the command-line entry point.
"""

import json

from battlesim.main import main


def test_default_scenario_summary(capsys):
    assert main(["--seed", "1", "--summary"]) == 0
    out = capsys.readouterr().out
    assert "Encounter 1" in out
    assert "PC" in out


def test_full_report_of_a_scenario_file(tmp_path, capsys, pc_record, minion_record):
    path = tmp_path / "scenario.json"
    path.write_text(
        json.dumps({"players": [pc_record], "encounters": [{"monsters": [minion_record]}]}),
        encoding="utf-8",
    )
    assert main([str(path), "--seed", "2", "-v"]) == 0
    out = capsys.readouterr().out
    assert "Round 1" in out
    assert "Minion" in out


def test_same_seed_same_report(capsys):
    main(["--seed", "5", "--summary"])
    first = capsys.readouterr().out
    main(["--seed", "5", "--summary"])
    assert capsys.readouterr().out == first


def test_save_writes_the_scenario(tmp_path):
    target = tmp_path / "saved.json"
    assert main(["--seed", "1", "--summary", "--save", str(target)]) == 0
    saved = json.loads(target.read_text(encoding="utf-8"))
    assert saved["players"][0]["name"] == "PC"
    assert [m["name"] for m in saved["encounters"][0]["monsters"]] == ["Boss", "Minion"]


def test_invalid_scenario_exits_with_error(tmp_path, mocker, pc_record):
    mock_log_critical = mocker.patch("battlesim.main.log_critical")
    pc_record["target"] = "enemy with the loudest voice"
    path = tmp_path / "scenario.json"
    path.write_text(
        json.dumps({"players": [pc_record], "encounters": [{"monsters": [pc_record]}]}),
        encoding="utf-8",
    )
    assert main([str(path)]) == 1
    mock_log_critical.assert_called_once()


def test_missing_scenario_exits_with_error(tmp_path, mocker):
    mock_log_critical = mocker.patch("battlesim.main.log_critical")
    assert main([str(tmp_path / "missing.json")]) == 1
    mock_log_critical.assert_called_once()
