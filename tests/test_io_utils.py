"""Tests for download file helpers."""

import os

import pytest

from shopify_schema_generator.io_utils import download_filename, write_download_file


@pytest.mark.parametrize(
    "name, kind, expected",
    [
        ("My Section", "schema", "my_section_schema.json"),
        ("My Section", "locales", "my_section_locales.json"),
        ("", "schema", "_schema.json"),
        ("Image/Text", "locales", "image_text_locales.json"),
    ],
)
def test_download_filename(name, kind, expected):
    assert download_filename(name, kind) == expected


def test_download_filename_unknown_kind():
    with pytest.raises(ValueError):
        download_filename("S", "settings")


def test_write_download_file():
    path = write_download_file('{"name": "S"}', "s_schema.json")

    assert os.path.basename(path) == "s_schema.json"
    with open(path, encoding="utf-8") as f:
        assert f.read() == '{"name": "S"}'


@pytest.mark.parametrize("filename", ["", "   ", "a/b_schema.json", ".."])
def test_write_download_file_rejects_bad_names(filename):
    with pytest.raises(ValueError):
        write_download_file("{}", filename)
