from collections.abc import Callable
from json import loads
from logging import getLogger
from os import pathsep
from os.path import normpath
from pathlib import Path
from posixpath import join as url_join

import sass

from ..models import (
    CompileEmpty,
    CompileFailure,
    CompileOptions,
    CompileRequest,
    CompileResult,
    CompileSuccess,
    DependencyList,
    FileSource,
    StringSource,
)
from .protocols import EngineProtocol

_logger = getLogger(__name__)


class LibsassEngine(EngineProtocol):
    def __init__(self, precision: int = 5) -> None:
        self._precision = precision

    def compile(self, request: CompileRequest) -> CompileResult:
        kwargs = self._compile_kwargs(request.options)
        try:
            match request.source:
                case FileSource(path=path):
                    return self._compile_file(path, kwargs)
                case StringSource(text=""):
                    return CompileSuccess("", None)
                case StringSource(text=text):
                    _logger.debug("Compiling %d characters of source", len(text))
                    output = sass.compile(string=text, **kwargs)
                    return _success(output, None)
        except sass.CompileError as e:
            return CompileFailure(_error_message(e))

    def _compile_file(self, path: Path, kwargs: dict) -> CompileResult:
        source_map_path = path.with_name(f"{path.name}.map")
        _logger.debug("Compiling %s", path)
        try:
            compiled = sass.compile(
                filename=str(path),
                source_map_filename=str(source_map_path),
                omit_source_map_url=True,
                **kwargs,
            )
        except OSError:
            return CompileFailure(
                f"Error: File to read not found or unreadable: {path}\n"
            )
        if compiled is None:
            return CompileEmpty()
        output, source_map = compiled
        return _success(output, _dependencies(source_map, path.parent))

    def _compile_kwargs(self, options: CompileOptions) -> dict:
        return {
            "output_style": options.output_style.value,
            "source_comments": options.source_comments,
            "include_paths": list(options.include_paths),
            "precision": self._precision,
            "custom_functions": {
                "image-url": image_url_function(options.image_path)
            },
        }


def image_url_function(image_path: str) -> Callable[[str], str]:
    """Build the `image-url($path)` function resolving images under `image_path`."""

    def image_url(path: str) -> str:
        return f'url("{url_join(image_path, path)}")'

    return image_url


def _success(output: str | None, dependencies: DependencyList | None) -> CompileResult:
    if output is None:
        return CompileEmpty()
    return CompileSuccess(output, dependencies)


def _dependencies(source_map: str, base_dir: Path) -> DependencyList:
    sources = loads(source_map).get("sources", [])
    return DependencyList(
        pathsep.join(normpath(base_dir / source) for source in sources)
    )


def _error_message(error: sass.CompileError) -> str | None:
    if not error.args or not error.args[0]:
        return None
    message = error.args[0]
    if isinstance(message, bytes):
        return message.decode("utf8", errors="replace")
    return str(message)
