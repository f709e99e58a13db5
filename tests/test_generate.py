from treepath.generate import (
    append_leaves,
    branch_lines,
    leaf_lines,
    main,
    write_sequence,
)
from treepath.tree import max_path, parse_tree


def test_branch_lines_format():
    assert list(branch_lines(1, 2)) == ["1 2 2 3", "2 2 4 5"]


def test_leaf_lines_format():
    assert list(leaf_lines(20001, 20002)) == ["20001 0", "20002 0"]


def test_empty_ranges():
    assert list(branch_lines(5, 4)) == []
    assert list(leaf_lines(5, 4)) == []


def test_write_then_append(tmp_path):
    target = tmp_path / "seq.txt"
    write_sequence(target, 3)
    append_leaves(target, 4, 7)
    lines = target.read_text().splitlines()
    assert lines == list(branch_lines(1, 3)) + list(leaf_lines(4, 7))


def test_write_truncates(tmp_path):
    target = tmp_path / "seq.txt"
    write_sequence(target, 5)
    write_sequence(target, 2)
    assert target.read_text().splitlines() == list(branch_lines(1, 2))


def test_generated_file_forms_a_tree(tmp_path):
    target = tmp_path / "seq.txt"
    write_sequence(target, 7)
    append_leaves(target, 8, 15)
    tree = parse_tree("15\n" + target.read_text())
    result = max_path(tree)
    assert result.path[0] == 0
    assert tree[result.path[-1]].is_leaf
    assert len(result.path) == 4
    assert result.total == sum(tree[i].value for i in result.path)


def test_main_write_and_append(tmp_path, capsys):
    target = tmp_path / "seq.txt"
    assert main(["write", "--path", str(target), "--count", "3"]) == 0
    assert main(["append", "--path", str(target), "--start", "4", "--stop", "5"]) == 0
    assert target.read_text().splitlines() == list(branch_lines(1, 3)) + list(
        leaf_lines(4, 5)
    )
    assert str(target) in capsys.readouterr().out


def test_main_reports_unwritable_path(tmp_path, capsys):
    assert main(["write", "--path", str(tmp_path), "--count", "1"]) == 1
    assert "error opening file" in capsys.readouterr().err