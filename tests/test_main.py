import io

import pytest

from link_tracker.__main__ import main


def test_scenario_prints_answers(capsys):
    assert main(["--scenario", "basic"]) == 0
    assert capsys.readouterr().out.splitlines() == ["true", "false"]


def test_reads_commands_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("add 5 6\nis linked 6 5\nis linked 5 7\n\nis linked 5 6\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["true", "false"]


def test_stats_go_to_stderr(tmp_path, capsys):
    commands = tmp_path / "commands.txt"
    commands.write_text("add 1 2\nbogus\n")
    assert main([str(commands), "--stats"]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Ignored lines: 1" in captured.err


def test_missing_command_file_fails(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1


def test_edges_requires_output(tmp_path):
    assert main(["--edges", str(tmp_path / "edges.csv")]) == 1


def test_unknown_scenario_is_rejected():
    with pytest.raises(SystemExit):
        main(["--scenario", "nope"])


def test_scenario_writes_answers_to_output(tmp_path, capsys):
    answers = tmp_path / "answers.txt"
    assert main(["--scenario", "basic", "--output", str(answers)]) == 0
    assert answers.read_text().splitlines() == ["true", "false"]
    assert capsys.readouterr().out == ""


def test_stdin_writes_answers_to_output(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("add 1 2\nis linked 1 2\n"))
    answers = tmp_path / "answers.txt"
    assert main(["--output", str(answers)]) == 0
    assert answers.read_text() == "true\n"
    assert capsys.readouterr().out == ""


def test_unwritable_output_fails(tmp_path):
    assert main(["--scenario", "basic", "--output", str(tmp_path / "nope" / "answers.txt")]) == 1
