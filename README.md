# flowind

A command-line tool and a helper library for inspecting test programs.
The library reads pattern lists (plist files). It follows `.pmfl`
include chains in a `vectors` folder. It also collects pattern names,
ports, die numbers and revisions from burst files, whether plain or
gzip-compressed.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
flow-indicator -PLIST:plist_example.plist
```

The command takes exactly one argument:

- `--help` exits without doing anything.
- An argument that contains `-PLIST:` starts the plist stage. That stage
  takes the file path after the prefix and stops there.

Any other argument, or any other number of arguments, does nothing. The
exit status is 0 on success. It is 1 when an error is printed.

## Library use

The package is split by concern.

`flowind.filesystem` handles the file system:

- `exists`, `is_directory`, `create_folder`, `get_current_path` and
  `make_preferred` are the basic checks and operations.
- `list_files_recursively` and `get_file_names_recursively` return sets
  of entry names.
- `get_files_data_recursively` returns `DirEntry` records, sorted and
  unique by file name.

Both skipping listers leave out the folder names you pass them and do
not descend into those folders.

`flowind.strings` holds text helpers:

- `tokenize`
- `all_digits_or_alphabet`
- `get_start_end_indexes_of_interval`
- `read_data_between_tags`
- `get_rev_number`
- `suitable_path`
- `hex_to_binary`

`flowind.helpers` holds the rest of the general helpers:

- `get_date` gives a timestamp that is safe to use in a file name.
- `check_valid_number_or_interval` and `check_validity_and_insert` parse
  numbers and intervals.
- `line_to_int_list` turns a comma-separated line into integers.
- `update_value_according_to_unit` scales by the unit prefixes m, u, P
  and M.
- `calc_expression_with_one_operator` evaluates `a*b`, `a-b` or `a+b`.
- `get_test_suite_or_pattern_mission` looks up test-suite missions.
- `get_ports` extracts ports. By default it writes them to `AllPorts.txt`.
- `convert_decimal_to_binary` returns the bits of a number.

`flowind.console` holds interactive prompts that read from standard
input:

- `yes_no_question`
- `get_test_program_path`
- `get_table_index`
- `get_names_with_minus`
- `get_numbers_with_intervals`
- `get_numbers_from_console`

It also has printing helpers: `print_lines`, `print_table`,
`print_error_message` and `print_dir_path_from_ore`.

`flowind.filehelper` reads pmfl and burst files:

- `get_bursts_path` maps burst names to their vector folders.
- `get_patterns_from_burst_folder` collects the `PatternData` of each
  burst. It does not search folders named `.cache` or `old`.
- `read_burst_file` reads a single file.
- `unzip_and_read` decompresses a `.gz` file into `./unzippedFiles`.
- `create_new_directory_with_date` makes a dated results folder.

`flowind.app` holds `ProgramManager` and `FlowIndicatorPlistPreCheck`.
`FlowIndicatorPlistPreCheck.plist_parser` collects and prints the names
that follow `Pat` in a plist file.

`flowind.osservice` holds `Color`, `print_with_color`,
`open_directory_window`, `call_pause` and `open_dir_window_and_pause`.

```python
from flowind.filehelper import get_bursts_path, get_patterns_from_burst_folder

folders = get_bursts_path("main.pmfl", "/tp/vectors", {"MY_BURST"}, False)
patterns = get_patterns_from_burst_folder("/tp", folders)
for burst, items in patterns.items():
    for item in items:
        print(burst, item.pattern_name, item.die_number, item.port_name)
```

## What it does not do

- The `flow-indicator` command does not read the plist file it is given.
  It only extracts the path. To get the pattern names, call
  `FlowIndicatorPlistPreCheck().plist_parser(path)` from Python.
- `open_directory_window` and `call_pause` act only on Windows. On other
  systems they do nothing.
- `print_with_color` writes colour codes only when standard output is a
  terminal.