# psview - A PostScript Interpreter
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from psview.cli import main
from psview.cli_args import build_argument_parser, get_output_base_name


def write_program(tmp_path, text, name="prog.ps"):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_missing_file_argument(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert "Please provide at least one input file!" in out
    assert "usage:" in out


def test_empty_file_argument(capsys):
    assert main(["--file", ""]) == 1
    assert "usage:" in capsys.readouterr().out


def test_unreadable_file(tmp_path, capsys):
    assert main(["--file", str(tmp_path / "missing.ps")]) == 1
    assert "Failed to open the specified file!" in capsys.readouterr().out


def test_runs_program(tmp_path):
    assert main(["--file", write_program(tmp_path, "1 2 add pstack")]) == 0


def test_runs_program_short_flag(tmp_path, capsys):
    assert main(["-f", write_program(tmp_path, "1 2 add pstack")]) == 0
    assert capsys.readouterr().out == "3\n"


def test_program_error_still_exits_zero(tmp_path):
    assert main(["--file", write_program(tmp_path, "42 paths")]) == 0


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("psview ")


def test_parser_defaults():
    args = build_argument_parser().parse_args([])
    assert args.inputfile == ""
    assert args.outputfile is None
    assert args.resolution is None
    assert not args.verbose


@pytest.mark.parametrize("outputfile, inputfile, expected", [
    ("out/page.png", "doc.ps", "page"),
    (None, "dir/doc.ps", "doc"),
    (None, None, "page"),
])
def test_output_base_name(outputfile, inputfile, expected):
    assert get_output_base_name(outputfile, inputfile) == expected


@pytest.mark.parametrize("resolution", ["0", "-72", "35", "9601"])
def test_resolution_out_of_range(tmp_path, capsys, resolution):
    prog = write_program(tmp_path, "1 2 add")
    assert main(["--file", prog, "-r", resolution]) == 1
    assert "Resolution must be between 36 and 9600 DPI." in capsys.readouterr().out
