"""Command line entry point for writing a feature-extraction batch file."""

from __future__ import annotations

import argparse
import sys

from .batch import BatchConfig, PathCheckError, create_bat


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mzbatgen",
        description="Write a batch file that runs MzGenerator over a folder of images.",
    )
    parser.add_argument("--mazda-folder", required=True)
    parser.add_argument("--image-folder", required=True)
    parser.add_argument("--image-pattern", default=".+")
    parser.add_argument("--roi-folder", required=True)
    parser.add_argument("--roi-pattern", default=".+")
    parser.add_argument(
        "--roi-same-as-image",
        action="store_true",
        help="take each ROI name from the image name with the .roi extension",
    )
    parser.add_argument("--options-folder", required=True)
    parser.add_argument("--options-file", required=True)
    parser.add_argument("--features-folder", required=True)
    parser.add_argument("--out-prefix", default="")
    parser.add_argument("--bat-folder", required=True)
    parser.add_argument("--bat-name", default="")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = _parser().parse_args(argv)
    config = BatchConfig(
        mazda_folder=args.mazda_folder,
        image_folder=args.image_folder,
        roi_folder=args.roi_folder,
        options_folder=args.options_folder,
        options_file_name=args.options_file,
        features_folder=args.features_folder,
        bat_folder=args.bat_folder,
        image_pattern=args.image_pattern,
        roi_pattern=args.roi_pattern,
        roi_same_as_image=args.roi_same_as_image,
        out_prefix=args.out_prefix,
        bat_file_name=args.bat_name,
    )
    try:
        target = create_bat(config)
    except (PathCheckError, ValueError) as exc:
        print(str(exc).strip(), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Bat File Not Saved: {exc}", file=sys.stderr)
        return 1
    if target is None:
        print("No image files found", file=sys.stderr)
        return 1
    print(target)
    return 0


if __name__ == "__main__":
    sys.exit(main())