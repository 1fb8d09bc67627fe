"""
Tests for cli

Test Coverage:
- main(): success message and exit codes
- Error message naming the failing stage
- Flags mapped onto ConverterConfig
"""

from pathlib import Path

import pytest
from PIL import Image

from atlas_cutter.cli import EXIT_FAILED, EXIT_OK, EXIT_USAGE, build_parser, main


def _args(image_path, atlas_path, out_dir, *extra):
    return ["-i", str(image_path), "-a", str(atlas_path), "-o", str(out_dir), *extra]


def test_main_success(atlas_files, capsys):
    image_path, atlas_path, out_dir = atlas_files

    code = main(_args(image_path, atlas_path, out_dir))

    assert code == EXIT_OK
    assert "Done! Wrote 2 part(s)" in capsys.readouterr().out
    assert (out_dir / "circle.png").is_file()


def test_main_invalid_output_dir(atlas_files, tmp_path: Path, capsys):
    image_path, atlas_path, _ = atlas_files

    code = main(_args(image_path, atlas_path, tmp_path / "missing"))

    assert code == EXIT_USAGE
    assert "Invalid output directory!" in capsys.readouterr().out


def test_main_parse_failure_prints_stage(atlas_files, capsys):
    image_path, atlas_path, out_dir = atlas_files
    atlas_path.write_text("sprite.png\nsize: 64,64\nhead\n  rotate: sideways\n", encoding="utf-8")

    code = main(_args(image_path, atlas_path, out_dir))

    assert code == EXIT_FAILED
    assert "Error while parsing the atlas: line 4" in capsys.readouterr().out


def test_main_cut_failure_prints_stage(atlas_files, capsys):
    image_path, atlas_path, out_dir = atlas_files
    Image.new("RGBA", (100, 50)).save(image_path)

    code = main(_args(image_path, atlas_path, out_dir))

    assert code == EXIT_FAILED
    assert "Error while cutting up the atlas" in capsys.readouterr().out


def test_main_format_flag(atlas_files):
    image_path, atlas_path, out_dir = atlas_files

    assert main(_args(image_path, atlas_path, out_dir, "--format", "bmp")) == EXIT_OK

    assert sorted(p.name for p in out_dir.iterdir()) == ["block.bmp", "circle.bmp"]


def test_main_reject_duplicates_flag(atlas_files, capsys):
    image_path, atlas_path, out_dir = atlas_files
    text = atlas_path.read_text(encoding="utf-8").replace("circle", "block")
    atlas_path.write_text(text, encoding="utf-8")

    code = main(_args(image_path, atlas_path, out_dir, "--reject-duplicates"))

    assert code == EXIT_FAILED
    assert "Duplicate part names: block" in capsys.readouterr().out


def test_parser_requires_all_paths():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-i", "a.png"])


def test_parser_defaults():
    args = build_parser().parse_args(["-i", "a.png", "-a", "-", "-o", "out"])
    assert args.atlas == "-"
    assert args.format == "png"
    assert args.lenient is False
    assert args.reject_duplicates is False
