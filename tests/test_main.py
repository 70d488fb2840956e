"""Tests for the command line entry point."""

import tempfile
from pathlib import Path

import pytest
from PIL import Image

from geonoise.main import main, parse_args, resolve_settings


def test_resolve_settings_overrides():
    args = parse_args([
        "--preset", "wood",
        "--resolution", "40x20",
        "--seed", "9",
        "--projection", "cylinder",
        "--gradient", "terrain",
        "--light",
    ])
    settings = resolve_settings(args)
    assert settings.preset == "wood"
    assert settings.size == (40, 20)
    assert settings.seed == 9
    assert settings.projection == "cylinder"
    assert settings.gradient == "terrain"
    assert settings.light_enabled is True


def test_resolve_settings_defaults():
    settings = resolve_settings(parse_args([]))
    assert settings.preset == "terrain"
    assert settings.size == (256, 256)


def test_bad_resolution():
    with pytest.raises(ValueError):
        resolve_settings(parse_args(["--resolution", "big"]))


def test_unknown_preset_in_config():
    with tempfile.TemporaryDirectory() as tmpdir:
        config = Path(tmpdir) / "render.yaml"
        config.write_text("preset: marble\n")
        with pytest.raises(ValueError):
            resolve_settings(parse_args(["--config", str(config)]))


def test_main_renders_preset(capsys):
    with tempfile.TemporaryDirectory() as tmpdir:
        output_path = Path(tmpdir) / "islands.png"
        main(["--preset", "islands", "--resolution", "16x12", "--render", str(output_path)])

        assert output_path.exists()
        assert Image.open(output_path).size == (16, 12)

    out = capsys.readouterr().out
    assert "Preset 'islands'" in out
    assert "- Clamp" in out


def test_main_with_config():
    with tempfile.TemporaryDirectory() as tmpdir:
        config = Path(tmpdir) / "render.yaml"
        config.write_text("preset: granite\nsize: [8, 8]\nprojection: sphere\n")
        output_path = Path(tmpdir) / "granite.png"
        main(["--config", str(config), "--render", str(output_path)])

        assert Image.open(output_path).size == (8, 8)
