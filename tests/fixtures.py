import pytest


@pytest.fixture
def valid_source():
    "provide Python source whose qname() literals are all valid"
    return ('from qname import qname\n'
            '\n'
            'STRING = qname("xs:string")\n'
            'ITEMS = [qname("item"), qname("a:b:c")]\n')


@pytest.fixture
def invalid_source():
    "provide Python source with one invalid and one malformed qname() literal"
    return ('import qname\n'
            '\n'
            'GOOD = qname.qname("ns:good")\n'
            'BAD = qname.qname("9lives")\n'
            'name = "x"\n'
            'WORSE = qname.qname(name)\n')


@pytest.fixture
def source_tree(tmp_path, valid_source, invalid_source):
    "provide a directory with one valid and one invalid Python file"
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "good.py").write_text(valid_source, encoding="utf-8")
    (tmp_path / "pkg" / "bad.py").write_text(invalid_source, encoding="utf-8")
    (tmp_path / "pkg" / "notes.txt").write_text('qname("9")', encoding="utf-8")
    return tmp_path / "pkg"
