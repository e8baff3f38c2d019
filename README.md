# mzbatgen

`mzbatgen` writes a Windows batch file that runs QMaZda's `MzGenerator.exe`
over every image in a folder. Each image is paired with a region-of-interest
(ROI) file, and the computed features are collected in a single CSV file.

## Checks

Before the batch file is written, every input is checked, in this order:

1. The QMaZda folder exists, is a directory, and contains `MzGenerator.exe`.
2. The image folder exists and is a directory. The image names that fully match a regular expression are listed in sorted order.
3. The ROI folder exists and is a directory. ROI names are found in one of two ways:
   - listed by a pattern, in the same way as the images;
   - with `--roi-same-as-image`, taken from each image's stem with a `.roi` suffix.
4. The options folder exists, is a directory, and contains the options file.
5. The feature output folder exists and is a directory.
6. The folder for the batch file exists and is a directory.

The first failed check stops the run and no file is written. When ROI files
are listed by pattern, the number of ROIs must equal the number of images;
they are paired in sorted order.

## Installation

```
pip install .
```

## Command line

```
mzbatgen --help
```

Required options:

- `--mazda-folder`
- `--image-folder`
- `--roi-folder`
- `--options-folder`
- `--options-file`
- `--features-folder`
- `--bat-folder`

Optional options:

- `--image-pattern` and `--roi-pattern` are regular expressions. Each defaults to `.+`.
- `--roi-same-as-image` takes ROI names from the image names, as described above.
- `--out-prefix` sets the name of the CSV file.
- `--bat-name` sets the name of the batch file.

### Output

The batch file is named `<bat name>Feat.bat` and is written to the bat folder.
The features land in `<prefix>.csv` in the features folder.

The script starts with `cls` and a short echoed header. After that:

- The first generator line writes the CSV with the options file applied (`-f`).
- Each later line appends to the same CSV (`-a`).

### Exit status

On success, the command prints the path of the written file and exits with
status 0. In the following cases it prints a message to standard error and
exits with status 1:

- a check fails;
- no image matches the pattern;
- the ROI and image counts differ;
- the file cannot be written.

## Library use

```python
from mzbatgen.batch import BatchConfig, create_bat, build_bat_content
from mzbatgen.folders import read_folder, format_names

names = read_folder("images", r".+\.tif")
print(format_names(names))
```

### `mzbatgen.folders`

- `read_folder(folder, pattern)` returns the sorted entry names that fully match `pattern`. If the folder is missing or is not a directory, it returns an empty list.
- `format_names(names)` joins the names into one text, with a newline after each name.

### `mzbatgen.batch`

`BatchConfig` holds the folders, file names and patterns.

Each individual check either raises `PathCheckError` or returns a result:

- `check_mazda_folder()` returns the generator path.
- `list_images()` returns the matching image names.
- `list_rois()` returns the matching ROI names. It returns an empty list when `roi_same_as_image` is set.
- `check_options_file()` returns the options file path.
- `check_features_folder()` returns nothing.
- `check_bat_folder()` returns nothing.

`reload()` runs all the checks in order and returns a `Listing` with `images`
and `rois`.

`build_bat_content(config, image_names, roi_names)` returns the script text.
It raises `ValueError` in either of these cases:

- there are no images;
- the ROI and image counts differ when ROIs are listed by pattern.

`create_bat(config)` runs `reload()`, writes the batch file, and returns its
path. It returns `None` when no images were found.

## What it does not do

`mzbatgen` only writes the batch script. It never runs `MzGenerator.exe` or
any other program. It has no graphical interface: all settings are given as
command-line options or as `BatchConfig` fields.