import io

import pytest

from treepath.cli import main
from treepath.tree import format_result, max_path, parse_tree

TEXT = "5\n1 2 2 3\n4 2 4 5\n6 0\n2 0\n1 0\n"


def test_single_leaf_output(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n5 0\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "Max Sum: 5.00\nPath: 1 \n"


def test_file_input_matches_library(tmp_path, capsys):
    source = tmp_path / "tree.txt"
    source.write_text(TEXT)
    assert main([str(source)]) == 0
    assert capsys.readouterr().out == format_result(max_path(parse_tree(TEXT)))


@pytest.mark.parametrize("threads", ["0", "2", "4"])
def test_threaded_output_matches_serial(monkeypatch, capsys, threads):
    monkeypatch.setattr("sys.stdin", io.StringIO(TEXT))
    assert main(["--threads", threads]) == 0
    assert capsys.readouterr().out == format_result(max_path(parse_tree(TEXT)))


def test_malformed_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1 1 2\n"))
    assert main([]) == 1
    captured = capsys.readouterr()
    assert "error" in captured.err
    assert captured.out == ""


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "error" in capsys.readouterr().err


def test_empty_tree_is_an_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err


def test_negative_threads_rejected(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(TEXT))
    with pytest.raises(SystemExit) as info:
        main(["--threads", "-1"])
    assert info.value.code == 2