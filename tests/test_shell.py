import io

import pytest

from oslab.shell import (
    MAX_ARGS,
    MAX_COMMANDS,
    History,
    change_directory,
    main,
    parse_count,
    run_command,
    run_pipeline,
    split_args,
    split_pipeline,
)


def _history(*commands):
    history = History()
    for command in commands:
        history.add(command)
    return history


def test_history_last_clamps_and_orders():
    history = _history("a", "b", "c")
    assert history.last(2) == ["b", "c"]
    assert history.last(10) == ["a", "b", "c"]
    assert history.last(0) == []


def test_history_format_numbers_from_one():
    history = _history("a", "b", "c")
    assert history.format(2) == "1. b\n2. c\n"
    assert history.format(0) == ""


def test_history_clear_empties():
    history = _history("a", "b")
    history.clear()
    assert len(history) == 0
    assert history.last(5) == []


def test_history_negative_count_rejected():
    with pytest.raises(ValueError):
        _history("a").last(-1)


def test_parse_count_valid():
    assert parse_count("5") == 5
    assert parse_count(" 7") == 7
    assert parse_count("0") == 0


def test_parse_count_not_integer():
    with pytest.raises(ValueError, match="Not a valid integer"):
        parse_count("abc")
    with pytest.raises(ValueError, match="Not a valid integer"):
        parse_count("")


def test_parse_count_invalid_character():
    with pytest.raises(ValueError, match="Invalid character: x"):
        parse_count("12x")


def test_parse_count_negative():
    with pytest.raises(ValueError, match="Negative number"):
        parse_count("-3")


def test_split_args_drops_empty_words():
    assert split_args("ls  -l   /tmp ") == ["ls", "-l", "/tmp"]


def test_split_args_limit():
    assert len(split_args(" ".join(["x"] * (MAX_ARGS + 10)))) == MAX_ARGS


def test_split_pipeline_pieces():
    assert split_pipeline("ls | wc|") == ["ls ", " wc"]
    assert len(split_pipeline("|".join(["a"] * (MAX_COMMANDS + 5)))) == MAX_COMMANDS


def test_cd_missing_argument(capsys):
    assert change_directory(["cd"]) is False
    assert "cd: Missing argument" in capsys.readouterr().err


def test_cd_to_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "sub"
    target.mkdir()
    assert change_directory(["cd", str(target)]) is True
    import os

    assert os.getcwd() == str(target)


def test_cd_home(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    assert change_directory(["cd", "~"]) is True
    import os

    assert os.getcwd() == str(home)


def test_cd_without_home(monkeypatch, capsys):
    monkeypatch.delenv("HOME", raising=False)
    assert change_directory(["cd", "~"]) is False
    assert "cd: Failed to get home directory" in capsys.readouterr().err


def test_run_command_history(capsys):
    history = _history("a", "b", "c")
    assert run_command(["history", "2"], history) == 0
    assert capsys.readouterr().out == history.format(2)


def test_run_command_history_bad_count(capsys):
    history = _history("a")
    assert run_command(["history"], history) == 1
    assert "Input incorrect: Not a valid integer" in capsys.readouterr().out


def test_run_command_exit_clears_history():
    history = _history("a", "b")
    with pytest.raises(SystemExit):
        run_command(["exit"], history)
    assert len(history) == 0


def test_run_command_external(capfd):
    assert run_command(["echo", "hi"], History()) == 0
    assert "hi" in capfd.readouterr().out


def test_run_command_missing_program(capfd):
    status = run_command(["no-such-program-for-tests"], History())
    assert status == 1
    assert "execvp" in capfd.readouterr().err


def test_run_command_cat_adds_newline(tmp_path, capfd):
    path = tmp_path / "data.txt"
    path.write_text("abc")
    assert run_command(["cat", str(path)], History()) == 0
    assert capfd.readouterr().out == "abc\n"


def test_run_pipeline_external(capfd):
    status = run_pipeline(["echo hello ", " tr a-z A-Z"], History())
    assert status == 0
    assert capfd.readouterr().out == "HELLO\n"


def test_run_pipeline_history_stage(capfd):
    history = _history("one", "two")
    run_pipeline(["history 5", "cat"], history)
    assert capfd.readouterr().out == history.format(5) + "one\ntwo\n"


def test_run_pipeline_exit_keeps_history(capfd):
    history = _history("one")
    run_pipeline(["exit", "cat"], history)
    assert capfd.readouterr().out == ""
    assert history.last(1) == ["one"]


def test_main_history_then_exit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("history 5\nexit\n"))
    assert main([]) == 0
    assert "1. history 5" in capsys.readouterr().out


def test_main_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    assert main([]) == 0
    assert "MTL 458 >" in capsys.readouterr().out