from click.testing import CliRunner
from .fixtures import valid_source, invalid_source, source_tree
from qname.cmdline import check, parse, iterSourceFiles


def test_check_valid_file(tmp_path, valid_source):
    path = tmp_path / "good.py"
    path.write_text(valid_source, encoding="utf-8")
    result = CliRunner().invoke(check, [str(path)])
    assert result.exit_code == 0
    assert "Invalid QName" not in result.output


def test_check_directory_fails(source_tree):
    result = CliRunner().invoke(check, [str(source_tree)])
    assert result.exit_code == 1
    bad = str(source_tree / "bad.py")
    assert "%s:4:19: Invalid QName: First char cannot be '9'" % bad in result.output
    assert "%s:6:9: qname() takes exactly one string literal" % bad in result.output
    assert "notes.txt" not in result.output


def test_check_emit(tmp_path, valid_source):
    path = tmp_path / "good.py"
    path.write_text(valid_source, encoding="utf-8")
    result = CliRunner().invoke(check, ["--emit", str(path)])
    assert result.exit_code == 0
    assert "__import__('qname').QName.trusted('xs:string')" in result.output


def test_check_custom_marker(tmp_path):
    path = tmp_path / "custom.py"
    path.write_text('A = qname("9")\nB = qn("9")\n', encoding="utf-8")
    result = CliRunner().invoke(check, ["-m", "qn", str(path)])
    assert result.exit_code == 1
    assert "%s:2:" % path in result.output
    assert "%s:1:" % path not in result.output


def test_check_reports_syntax_errors(tmp_path):
    path = tmp_path / "broken.py"
    path.write_text("def broken(:\n", encoding="utf-8")
    result = CliRunner().invoke(check, [str(path)])
    assert result.exit_code == 1
    assert str(path) in result.output


def test_check_requires_paths():
    result = CliRunner().invoke(check, [])
    assert result.exit_code == 2


def test_iter_source_files(source_tree):
    files = list(iterSourceFiles([str(source_tree)]))
    assert [f.rsplit("/", 1)[-1] for f in files] == ["bad.py", "good.py"]


def test_parse_valid_names():
    result = CliRunner().invoke(parse, ["ns:local", "plain"])
    assert result.exit_code == 0
    assert "  namespace: ns\n  localname: local" in result.output
    assert "  namespace: None\n  localname: plain" in result.output


def test_parse_invalid_name():
    result = CliRunner().invoke(parse, ["ok", "9bad"])
    assert result.exit_code == 1
    assert "'9bad': Invalid QName: First char cannot be '9'" in result.output


def test_check_honours_coding_declaration(tmp_path):
    path = tmp_path / "latin.py"
    path.write_bytes(b'# -*- coding: latin-1 -*-\nA = "\xe9"\nX = qname("9")\n')
    result = CliRunner().invoke(check, [str(path)])
    assert result.exit_code == 1
    assert "%s:3:11: Invalid QName: First char cannot be '9'" % path in result.output


def test_check_reports_undecodable_source(tmp_path):
    path = tmp_path / "broken.py"
    path.write_bytes(b'# -*- coding: utf-8 -*-\nX = "\xff"\n')
    result = CliRunner().invoke(check, [str(path)])
    assert result.exit_code == 1
    assert "%s: cannot decode source" % path in result.output


def test_check_emit_bom_file(tmp_path):
    path = tmp_path / "bom.py"
    path.write_bytes(b'\xef\xbb\xbfX = qname("a:b")\n')
    result = CliRunner().invoke(check, ["--emit", str(path)])
    assert result.exit_code == 0
    assert "X = __import__('qname').QName.trusted('a:b')" in result.output


def test_check_ignores_unrelated_methods(tmp_path):
    path = tmp_path / "other.py"
    path.write_text('elem = object()\nelem.qname(1)\n', encoding="utf-8")
    result = CliRunner().invoke(check, [str(path)])
    assert result.exit_code == 0
