from os import pathsep
from pathlib import Path

from pytest import raises

from sassz.configuring.settings import Settings
from sassz.exceptions import ConfigurationError
from sassz.models import CompileOptions, OutputStyle


def test_defaults(working_dir: Path) -> None:
    settings = Settings.from_yaml(working_dir)
    assert settings.config_files == ()
    assert settings.compile_options() == CompileOptions()
    assert settings.chunk_size == 512
    assert settings.precision == 5


def test_local_file_overrides_user_file(working_dir: Path) -> None:
    user_config_dir = working_dir.parent / "config"
    user_config_dir.mkdir()
    (user_config_dir / "sassz.yml").write_text(
        "output_style: expanded\nimage_path: img\n", encoding="utf8"
    )
    (working_dir / "sassz.yml").write_text(
        "output_style: compressed\ninclude_paths: [vendor]\n", encoding="utf8"
    )
    settings = Settings.from_yaml(working_dir)
    assert len(settings.config_files) == 2
    assert settings.compile_options() == CompileOptions(
        output_style=OutputStyle.Compressed,
        include_paths=("vendor",),
        image_path="img",
    )


def test_empty_file(working_dir: Path) -> None:
    (working_dir / "sassz.yml").write_text("", encoding="utf8")
    assert Settings.from_yaml(working_dir).compile_options() == CompileOptions()


def test_invalid_file(working_dir: Path) -> None:
    (working_dir / "sassz.yml").write_text("output_style: fancy\n", encoding="utf8")
    with raises(ConfigurationError, match="invalid configuration"):
        Settings.from_yaml(working_dir)


def test_unknown_key(working_dir: Path) -> None:
    (working_dir / "sassz.yml").write_text("colour: red\n", encoding="utf8")
    with raises(ConfigurationError):
        Settings.from_yaml(working_dir)


def test_command_line_overrides(working_dir: Path) -> None:
    (working_dir / "sassz.yml").write_text(
        "output_style: expanded\ninclude_paths: [configured]\n", encoding="utf8"
    )
    options = Settings.from_yaml(working_dir).compile_options(
        output_style=OutputStyle.Compact,
        source_comments=True,
        include_paths=(f"a{pathsep}b", "c"),
    )
    assert options == CompileOptions(
        output_style=OutputStyle.Compact,
        source_comments=True,
        include_paths=("a", "b", "c", "configured"),
    )
