import sys
from logging import getLogger
from pathlib import Path

from .models import (
    CompileEmpty,
    CompileFailure,
    CompileResult,
    CompileSuccess,
    ExitCode,
)

_logger = getLogger(__name__)


def dispatch(result: CompileResult, output_file: Path | None = None) -> ExitCode:
    """Route a compilation result to its sink and compute the exit code.

    Exactly one sink receives something: the error stream for failures, the output \
    file when one is given, standard output otherwise.

    Args:
        result: Outcome reported by the engine.
        output_file: File receiving the compiled output instead of standard output.

    Returns:
        The exit code matching the outcome.
    """
    match result:
        case CompileFailure(message=None):
            _logger.error("An error occurred; no error message available.")
            return ExitCode.Failure
        case CompileFailure(message=message):
            sys.stderr.write(message)
            sys.stderr.flush()
            return ExitCode.Failure
        case CompileSuccess(output=output) if output_file is not None:
            return _write_output_file(output, output_file)
        case CompileSuccess(output=output):
            sys.stdout.write(output)
            sys.stdout.flush()
            return ExitCode.Success
        case CompileEmpty():
            _logger.error("Unknown internal error.")
            return ExitCode.InternalError


def _write_output_file(output: str, output_file: Path) -> ExitCode:
    try:
        fh = output_file.open("w", encoding="utf8", newline="")
    except OSError as e:
        _logger.error(
            "Error opening output file %s: %s", output_file, e.strerror or e
        )
        return ExitCode.Failure
    try:
        with fh:
            fh.write(output)
    except OSError as e:
        _logger.error(
            "Error writing to output file %s: %s", output_file, e.strerror or e
        )
        return ExitCode.Failure
    _logger.debug("Wrote %d characters to %s", len(output), output_file)
    return ExitCode.Success
