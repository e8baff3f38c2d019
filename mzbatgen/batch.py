"""Checking the configured folders and generating the feature-extraction batch file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .folders import read_folder

GENERATOR_NAME = "MzGenerator.exe"
_RULE = (
    'echo "------------------------------------------------------------------'
    '------------------------"\n'
)


class PathCheckError(Exception):
    """A configured folder or file is missing or is not what it should be."""


@dataclass
class Listing:
    """File names found in the image and ROI folders."""

    images: list[str] = field(default_factory=list)
    rois: list[str] = field(default_factory=list)


def _check_dir(label: str, folder: Path) -> None:
    if not folder.exists():
        raise PathCheckError(f"{label} : {folder} not exists ")
    if not folder.is_dir():
        raise PathCheckError(f"{label} : {folder} This is not a directory path ")


@dataclass
class BatchConfig:
    """Folders, file names and patterns that describe one batch file."""

    mazda_folder: Path
    image_folder: Path
    roi_folder: Path
    options_folder: Path
    options_file_name: str
    features_folder: Path
    bat_folder: Path
    image_pattern: str = ".+"
    roi_pattern: str = ".+"
    roi_same_as_image: bool = False
    out_prefix: str = ""
    bat_file_name: str = ""

    def __post_init__(self) -> None:
        self.mazda_folder = Path(self.mazda_folder)
        self.image_folder = Path(self.image_folder)
        self.roi_folder = Path(self.roi_folder)
        self.options_folder = Path(self.options_folder)
        self.features_folder = Path(self.features_folder)
        self.bat_folder = Path(self.bat_folder)

    @property
    def generator_path(self) -> Path:
        return self.mazda_folder / GENERATOR_NAME

    @property
    def options_file(self) -> Path:
        return self.options_folder / self.options_file_name

    @property
    def features_file(self) -> Path:
        return self.features_folder / f"{self.out_prefix}.csv"

    @property
    def bat_file(self) -> Path:
        return self.bat_folder / f"{self.bat_file_name}Feat.bat"

    def check_mazda_folder(self) -> Path:
        """Check the MaZda folder and its generator; return the generator path."""
        _check_dir("QMaZda folder", self.mazda_folder)
        generator = self.generator_path
        if not generator.exists():
            raise PathCheckError(f"File : {generator} not exists ")
        return generator

    def list_images(self) -> list[str]:
        """Check the image folder and return the image names matching the pattern."""
        _check_dir("Image folder", self.image_folder)
        return read_folder(self.image_folder, self.image_pattern)

    def list_rois(self) -> list[str]:
        """Check the ROI folder and return the ROI names matching the pattern.

        When ROI names follow the image names, nothing is listed.
        """
        _check_dir("ROI folder", self.roi_folder)
        if self.roi_same_as_image:
            return []
        return read_folder(self.roi_folder, self.roi_pattern)

    def check_options_file(self) -> Path:
        """Check the options folder and options file; return the file path."""
        _check_dir("Options folder", self.options_folder)
        options = self.options_file
        if not options.exists():
            raise PathCheckError(f"Options file : {options} not exists ")
        return options

    def check_features_folder(self) -> None:
        """Check the folder the features are written to."""
        _check_dir("MzFeatutes folder", self.features_folder)

    def check_bat_folder(self) -> None:
        """Check the folder the batch file is written to."""
        _check_dir("Bat", self.bat_folder)

    def reload(self) -> Listing:
        """Check every path in order and return the file listings."""
        self.check_mazda_folder()
        images = self.list_images()
        rois = self.list_rois()
        self.check_options_file()
        self.check_features_folder()
        self.check_bat_folder()
        return Listing(images=images, rois=rois)


def build_bat_content(
    config: BatchConfig, image_names: list[str], roi_names: list[str]
) -> str:
    """Return the batch text running the generator on every image and its ROI."""
    if not image_names:
        raise ValueError("no image files to process")
    if not config.roi_same_as_image and len(image_names) != len(roi_names):
        raise ValueError(f" #rois {len(roi_names)} != #images : {len(image_names)}")

    generator = config.generator_path
    features = config.features_file
    lines = ["cls\n", _RULE, 'echo " Test Data"\n', _RULE]
    for index, image_name in enumerate(image_names):
        image_file = config.image_folder / image_name
        if config.roi_same_as_image:
            roi_file = config.roi_folder / f"{image_file.stem}.roi"
        else:
            roi_file = config.roi_folder / roi_names[index]
        command = f"{generator} -m roi -i {image_file} -r {roi_file}"
        if index == 0:
            lines.append(f"{command}    -o {features} -f {config.options_file}\n")
        else:
            lines.append(f"{command} -a -o {features}\n")
    return "".join(lines)


def create_bat(config: BatchConfig) -> Path | None:
    """Check the paths and write the batch file; return its path.

    Returns None when no image files are found.
    """
    listing = config.reload()
    if not listing.images:
        return None
    content = build_bat_content(config, listing.images, listing.rois)
    target = config.bat_file
    target.write_text(content)
    return target