import io
import json

from jsonpath_rfc9535.cli import main


def write_doc(tmp_path, data):
    doc = tmp_path / "doc.json"
    doc.write_text(json.dumps(data))
    return str(doc)


def test_values(tmp_path, capsys):
    doc = write_doc(tmp_path, {"a": [1, 2, {"b": 3}]})
    assert main(["$.a[*]", doc]) == 0
    out = capsys.readouterr().out
    assert json.loads(out) == [1, 2, {"b": 3}]


def test_paths(tmp_path, capsys):
    doc = write_doc(tmp_path, {"a": [1, 2]})
    assert main(["--paths", "$.a[*]", doc]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["$['a'][0]", "$['a'][1]"]


def test_indent(tmp_path, capsys):
    doc = write_doc(tmp_path, {"a": 1})
    assert main(["--indent", "2", "$.a", doc]) == 0
    assert capsys.readouterr().out == "[\n  1\n]\n"


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO('{"a": "x"}'))
    assert main(["$.a"]) == 0
    assert json.loads(capsys.readouterr().out) == ["x"]


def test_invalid_query(tmp_path, capsys):
    doc = write_doc(tmp_path, {})
    assert main(["$.a[", doc]) == 1
    assert capsys.readouterr().err.startswith("Invalid query:")


def test_invalid_json(tmp_path, capsys):
    doc = tmp_path / "doc.json"
    doc.write_text("{")
    assert main(["$.a", str(doc)]) == 1
    assert capsys.readouterr().err.startswith("Invalid JSON:")
