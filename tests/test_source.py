import pytest

from passerine.common.source import Source


def test_from_string_points_to_default_path():
    source = Source.from_string("x = 1")
    assert source.contents == "x = 1"
    assert source.path == "./source"


def test_from_path_reads_file(tmp_path):
    target = tmp_path / "main.pn"
    target.write_text('println "hi"\n', encoding="utf-8")

    source = Source.from_path(target)

    assert source.contents == 'println "hi"\n'
    assert source.path == str(target)


def test_from_path_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Source.from_path(tmp_path / "missing.pn")


def test_equality_compares_contents_and_path():
    assert Source.from_string("a") == Source.from_string("a")
    assert Source.from_string("a") != Source.from_string("b")
    assert Source("a", "one.pn") != Source("a", "two.pn")