from os import pathsep
from pathlib import Path

from sassz.components.engine import LibsassEngine, image_url_function
from sassz.models import (
    CompileFailure,
    CompileOptions,
    CompileRequest,
    CompileSuccess,
    FileSource,
    OutputStyle,
    StringSource,
)

_compressed = CompileOptions(output_style=OutputStyle.Compressed)


def test_compile_string() -> None:
    result = LibsassEngine().compile(
        CompileRequest(StringSource("a { b: c; }"), _compressed)
    )
    assert result == CompileSuccess("a{b:c}\n", None)


def test_compile_string_error() -> None:
    result = LibsassEngine().compile(
        CompileRequest(StringSource("a { b: c"), _compressed)
    )
    assert isinstance(result, CompileFailure)
    assert result.message is not None
    assert "Error" in result.message


def test_compile_string_source_comments() -> None:
    options = CompileOptions(output_style=OutputStyle.Expanded, source_comments=True)
    result = LibsassEngine().compile(
        CompileRequest(StringSource("a { b: c; }"), options)
    )
    assert isinstance(result, CompileSuccess)
    assert "line 1" in result.output


def test_compile_string_include_paths(tmp_path: Path) -> None:
    vendor = tmp_path / "vendor"
    vendor.mkdir()
    (vendor / "_lib.scss").write_text("$color: red;\n", encoding="utf8")
    options = CompileOptions(
        output_style=OutputStyle.Compressed, include_paths=(str(vendor),)
    )
    result = LibsassEngine().compile(
        CompileRequest(StringSource('@import "lib";\na { color: $color; }'), options)
    )
    assert result == CompileSuccess("a{color:red}\n", None)


def test_compile_file_dependencies(working_dir: Path) -> None:
    (working_dir / "style.scss").write_text(
        '@import "colors";\na { color: $red; }\n', encoding="utf8"
    )
    (working_dir / "_colors.scss").write_text("$red: red;\n", encoding="utf8")
    result = LibsassEngine().compile(
        CompileRequest(FileSource(Path("style.scss")), _compressed)
    )
    assert isinstance(result, CompileSuccess)
    assert result.output == "a{color:red}\n"
    assert "sourceMappingURL" not in result.output
    assert not (working_dir / "style.scss.map").exists()
    assert result.dependencies is not None
    assert {Path(d).name for d in result.dependencies.split(pathsep)} == {
        "style.scss",
        "_colors.scss",
    }


def test_compile_missing_file(working_dir: Path) -> None:
    result = LibsassEngine().compile(
        CompileRequest(FileSource(Path("missing.scss")), _compressed)
    )
    assert isinstance(result, CompileFailure)
    assert result.message is not None
    assert "missing.scss" in result.message


def test_image_url_function() -> None:
    assert image_url_function("images")("logo.png") == 'url("images/logo.png")'
    assert image_url_function("img/")("a/b.png") == 'url("img/a/b.png")'
    assert image_url_function("")("logo.png") == 'url("logo.png")'


def test_compile_empty_string() -> None:
    result = LibsassEngine().compile(CompileRequest(StringSource(""), _compressed))
    assert result == CompileSuccess("", None)
