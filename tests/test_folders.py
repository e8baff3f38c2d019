import re
from pathlib import Path

import pytest

from mzbatgen.folders import format_names, read_folder


def _touch(folder: Path, *names: str) -> None:
    for name in names:
        (folder / name).write_text("x")


def test_missing_folder_gives_empty_list(tmp_path):
    assert read_folder(tmp_path / "missing") == []


def test_file_instead_of_folder_gives_empty_list(tmp_path):
    _touch(tmp_path, "plain.txt")
    assert read_folder(tmp_path / "plain.txt") == []


def test_names_are_sorted(tmp_path):
    _touch(tmp_path, "c.bmp", "a.bmp", "b.bmp")
    assert read_folder(tmp_path) == ["a.bmp", "b.bmp", "c.bmp"]


def test_pattern_must_match_whole_name(tmp_path):
    _touch(tmp_path, "a.bmp", "a.bmp.txt", "b.roi")
    assert read_folder(tmp_path, r".*\.bmp") == ["a.bmp"]


def test_directories_are_listed_too(tmp_path):
    _touch(tmp_path, "file.txt")
    (tmp_path / "sub").mkdir()
    assert read_folder(tmp_path) == ["file.txt", "sub"]


def test_empty_folder(tmp_path):
    assert read_folder(tmp_path) == []


def test_invalid_pattern_raises(tmp_path):
    _touch(tmp_path, "a.bmp")
    with pytest.raises(re.error):
        read_folder(tmp_path, "(")


def test_format_names_empty():
    assert format_names([]) == ""


def test_format_names_joins_with_newlines():
    assert format_names(["a", "b"]) == "a\nb\n"


def test_format_names_round_trip(tmp_path):
    _touch(tmp_path, "x1", "x2", "x3")
    names = read_folder(tmp_path)
    assert format_names(names).splitlines() == names