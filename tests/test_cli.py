from pathlib import Path

import pytest

from mzbatgen.cli import main


@pytest.fixture
def layout(tmp_path: Path) -> dict[str, Path]:
    folders = {
        name: tmp_path / name
        for name in ("mazda", "images", "rois", "options", "features", "bat")
    }
    for folder in folders.values():
        folder.mkdir()
    (folders["mazda"] / "MzGenerator.exe").write_text("")
    (folders["images"] / "a.bmp").write_text("")
    (folders["rois"] / "a.roi").write_text("")
    (folders["options"] / "opt.txt").write_text("")
    return folders


def _argv(layout: dict[str, Path]) -> list[str]:
    return [
        "--mazda-folder", str(layout["mazda"]),
        "--image-folder", str(layout["images"]),
        "--roi-folder", str(layout["rois"]),
        "--options-folder", str(layout["options"]),
        "--options-file", "opt.txt",
        "--features-folder", str(layout["features"]),
        "--out-prefix", "out",
        "--bat-folder", str(layout["bat"]),
        "--bat-name", "run",
    ]


def test_main_writes_bat_file(layout, capsys):
    assert main(_argv(layout)) == 0
    target = layout["bat"] / "runFeat.bat"
    assert capsys.readouterr().out.strip() == str(target)
    assert target.read_text().startswith("cls\n")


def test_main_reports_missing_folder(layout, capsys):
    argv = _argv(layout)
    argv[1] = str(layout["mazda"] / "missing")
    assert main(argv) == 1
    assert "not exists" in capsys.readouterr().err


def test_main_without_images(layout, capsys):
    (layout["images"] / "a.bmp").unlink()
    assert main(_argv(layout)) == 1
    assert "No image files found" in capsys.readouterr().err
    assert list(layout["bat"].iterdir()) == []


def test_main_roi_same_as_image(layout):
    (layout["rois"] / "a.roi").unlink()
    assert main(_argv(layout) + ["--roi-same-as-image"]) == 0
    content = (layout["bat"] / "runFeat.bat").read_text()
    assert str(layout["rois"] / "a.roi") in content


def test_main_requires_arguments():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2