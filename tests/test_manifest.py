import pytest

from passerine.aspen.manifest import (
    MANIFEST,
    Manifest,
    ManifestError,
    PackageInfo,
)

VALID = """
[package]
name = "demo"
version = "1.2.3"
authors = ["Someone <someone@example.com>"]
readme = "README.md"

[dependencies]
other = "0.1.0"
"""


def test_for_name_defaults():
    manifest = Manifest.for_name("demo")
    assert manifest.package.name == "demo"
    assert manifest.package.version == "0.0.0"
    assert manifest.package.authors == []
    assert manifest.dependencies == {}


def test_round_trip_fresh_manifest():
    manifest = Manifest.for_name("demo")
    assert Manifest.parse(manifest.to_toml()) == manifest


def test_parse_valid():
    manifest = Manifest.parse(VALID)
    assert manifest.package == PackageInfo(
        name="demo",
        version="1.2.3",
        authors=["Someone <someone@example.com>"],
        readme="README.md",
    )
    assert manifest.dependencies == {"other": "0.1.0"}


def test_round_trip_with_optional_fields():
    manifest = Manifest.parse(VALID)
    assert Manifest.parse(manifest.to_toml()) == manifest


def test_optional_none_fields_are_omitted():
    text = Manifest.for_name("demo").to_toml()
    assert "license" not in text
    assert "readme" not in text


@pytest.mark.parametrize(
    "source",
    [
        "not toml at all = = =",
        '[package]\nname = "x"\nversion = "0"\nauthors = []\n',
        '[package]\nname = "x"\nauthors = []\n[dependencies]\n',
        '[package]\nname = "x"\nversion = "0"\nauthors = [1]\n[dependencies]\n',
        '[dependencies]\n',
    ],
)
def test_parse_rejects_malformed(source):
    with pytest.raises(ManifestError, match="Could not parse the manifest file"):
        Manifest.parse(source)


def test_find_searches_upward(tmp_path):
    (tmp_path / MANIFEST).write_text(Manifest.for_name("up").to_toml())
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    manifest, directory = Manifest.find(nested)
    assert manifest.package.name == "up"
    assert directory == tmp_path


def test_find_in_same_directory(tmp_path):
    (tmp_path / MANIFEST).write_text(Manifest.for_name("here").to_toml())
    manifest, directory = Manifest.find(tmp_path)
    assert (manifest.package.name, directory) == ("here", tmp_path)


def test_find_reports_bad_manifest(tmp_path):
    (tmp_path / MANIFEST).write_text("[[[")
    with pytest.raises(ManifestError, match="Could not parse"):
        Manifest.find(tmp_path)