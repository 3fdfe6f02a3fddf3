import sys
from logging import getLogger
from pathlib import Path
from typing import BinaryIO

from .components.protocols import EngineProtocol
from .dispatching import dispatch
from .exceptions import DependencyFileError, InputReadError
from .models import (
    CompileOptions,
    CompileRequest,
    CompileSuccess,
    ExitCode,
    FileSource,
    StringSource,
)
from .reading import accumulate, default_chunk_size
from .rules import write_rules

_logger = getLogger(__name__)


def compile_file(
    engine: EngineProtocol,
    options: CompileOptions,
    input_file: Path,
    output_file: Path | None = None,
    rules_file: Path | None = None,
) -> ExitCode:
    """Compile `input_file` and route the result.

    When `rules_file` is given and the compilation succeeded, the make rules \
    describing the imported files are written to it as well. The engine not \
    reporting any dependency is not an error: nothing is written in that case.

    Args:
        engine: Engine doing the actual compilation.
        options: Options passed as is to the engine.
        input_file: Stylesheet to compile.
        output_file: File receiving the output. Standard output if None.
        rules_file: File receiving the make rules. Requires `output_file`.

    Raises:
        ValueError: Raised if `rules_file` is given without `output_file`.

    Returns:
        The exit code of the whole operation.
    """
    if rules_file is not None and output_file is None:
        msg = "writing make rules requires an output file to use as target"
        raise ValueError(msg)
    result = engine.compile(CompileRequest(FileSource(input_file), options))
    exit_code = dispatch(result, output_file)
    if (
        exit_code is not ExitCode.Success
        or rules_file is None
        or not isinstance(result, CompileSuccess)
        or not result.dependencies
    ):
        return exit_code
    try:
        write_rules(result.dependencies, str(output_file), rules_file)
    except DependencyFileError as e:
        _logger.error(str(e))
        return ExitCode.Failure
    return exit_code


def compile_stdin(
    engine: EngineProtocol,
    options: CompileOptions,
    output_file: Path | None = None,
    stream: BinaryIO | None = None,
    chunk_size: int = default_chunk_size,
) -> ExitCode:
    """Compile the whole content of `stream` and route the result.

    No make rules are ever produced for an in-memory source.

    Args:
        engine: Engine doing the actual compilation.
        options: Options passed as is to the engine.
        output_file: File receiving the output. Standard output if None.
        stream: Stream to read the source from. Standard input if None.
        chunk_size: Number of bytes requested from the stream at each read.

    Raises:
        InputError: Raised if the source cannot be read. Nothing is dispatched then.

    Returns:
        The exit code of the whole operation.
    """
    source = accumulate(sys.stdin.buffer if stream is None else stream, chunk_size)
    try:
        text = source.decode("utf8")
    except UnicodeDecodeError as e:
        msg = f"error reading standard input: {e}"
        raise InputReadError(msg) from e
    result = engine.compile(CompileRequest(StringSource(text), options))
    return dispatch(result, output_file)
