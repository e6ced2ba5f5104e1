from typing import *
from hashset import __version__
from hashset.cli.setops import main, load_set, SetOpsError
import io
import sys
import pytest

@pytest.fixture
def operands(tmp_path) -> Tuple[str, str]:
    left = tmp_path / "left.txt"
    right = tmp_path / "right.txt"
    left.write_text("hello\nnew\nset\nhello\n\n")
    right.write_text("set\nbye\r\n")
    return str(left), str(right)

cases: List[Tuple[str, List[str]]] = [
    ("union", ["bye", "hello", "new", "set"]),
    ("intersect", ["set"]),
    ("difference", ["hello", "new"]),
]

@pytest.mark.parametrize("operation,expected", cases)
def test_sorted_output(operands, capsys, operation: str, expected: List[str]):
    main([operation, *operands, "--sorted"])
    out = capsys.readouterr().out
    assert out.splitlines() == expected

def test_unsorted_output(operands, capsys):
    main(["union", *operands])
    out = capsys.readouterr().out
    assert sorted(out.splitlines()) == ["bye", "hello", "new", "set"]

def test_count(operands, capsys):
    main(["difference", *operands, "-c"])
    assert capsys.readouterr().out == "2\n"

def test_output_file(operands, tmp_path):
    outfile = tmp_path / "out.txt"
    main(["intersect", *operands, "-o", str(outfile)])
    assert outfile.read_text() == "set\n"

def test_stdin_operand(operands, capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("new\nother\n"))
    main(["difference", operands[0], "-", "-s"])
    assert capsys.readouterr().out.splitlines() == ["hello", "set"]

def test_double_stdin(operands, capsys):
    with pytest.raises(SystemExit) as e:
        main(["union", "-", "-"])
    assert e.value.code == 1
    assert capsys.readouterr().err.startswith("error: stdin")

def test_missing_file(operands, tmp_path, capsys):
    missing = str(tmp_path / "missing.txt")
    with pytest.raises(SystemExit) as e:
        main(["union", operands[0], missing])
    assert e.value.code == 1
    assert f"error: could not read '{missing}'" in capsys.readouterr().err

def test_load_set_error(tmp_path):
    with pytest.raises(SetOpsError):
        load_set(str(tmp_path))

def test_unsupported_operation(operands, capsys):
    with pytest.raises(SystemExit) as e:
        main(["xor", *operands])
    assert e.value.code == 1
    err = capsys.readouterr().err
    assert "error: unsupported operation 'xor'" in err
    assert "info: supported operations: union, intersect, difference" in err

def test_version(capsys):
    main(["-v"])
    assert capsys.readouterr().out.strip().endswith(__version__)

def test_help(capsys):
    main([])
    assert "usage:" in capsys.readouterr().out

def test_undecodable_file(operands, tmp_path, capsys):
    bad = tmp_path / "bad.txt"
    bad.write_bytes(b"\xff\xfe\n")
    with pytest.raises(SystemExit) as e:
        main(["union", str(bad), operands[1]])
    assert e.value.code == 1
    assert f"error: could not read '{bad}'" in capsys.readouterr().err

def test_undecodable_stdin(operands, capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"\xff\xfe\n"), encoding = "utf-8"))
    with pytest.raises(SystemExit) as e:
        main(["union", operands[0], "-"])
    assert e.value.code == 1
    assert "error: could not read '-'" in capsys.readouterr().err

def test_unwritable_output(operands, tmp_path, capsys):
    with pytest.raises(SystemExit) as e:
        main(["union", *operands, "-o", str(tmp_path)])
    assert e.value.code == 1
    assert f"error: could not write '{tmp_path}'" in capsys.readouterr().err
