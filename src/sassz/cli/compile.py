from pathlib import Path
from typing import Annotated

from cyclopts import Parameter

from ..models import OutputStyle
from . import app


@app.default
def compile(  # noqa: A001
    file: Annotated[Path | None, Parameter(allow_leading_hyphen=True)] = None,
    /,
    *,
    output: Annotated[Path | None, Parameter(name=["--output", "-o"])] = None,
    style: Annotated[OutputStyle | None, Parameter(name=["--style", "-t"])] = None,
    line_comments: Annotated[
        bool, Parameter(name=["--line-comments", "-l"], negative="")
    ] = False,
    include_path: Annotated[
        list[str] | None, Parameter(name=["--include-path", "-I"])
    ] = None,
    deps: Annotated[Path | None, Parameter(name=["--deps", "-M"])] = None,
    verbose: Annotated[bool, Parameter(name=["--verbose", "-v"], negative="")] = False,
    workdir: Path = Path(),
) -> None:
    """Compile the stylesheet FILE, or standard input if FILE is absent or -.

    Args:
        file: Stylesheet to compile
        output: Write output to this file instead of standard output
        style: Output style
        line_comments: Emit comments showing original line numbers
        include_path: Add a path to the import search path, can be repeated
        deps: Write a make rule describing the import dependencies to this file
        verbose: Log what is being done
        workdir: Directory in which to look for a sassz.yml configuration file

    """
    import sys
    from logging import DEBUG, getLogger

    from .. import app_name
    from ..components.factory import SettingsFactory
    from ..configuring.settings import Settings
    from ..exceptions import UsageError
    from ..pipelines import compile_file, compile_stdin

    logger = getLogger(__name__)
    if verbose:
        getLogger(app_name).setLevel(DEBUG)

    from_stdin = file is None or str(file) == "-"
    if not from_stdin and str(file).startswith("-"):
        msg = f"unknown option {file}"
        raise UsageError(msg)
    if deps is not None and output is None:
        msg = "when using --deps you must also specify an output file with --output"
        raise UsageError(msg)
    if deps is not None and from_stdin:
        msg = "when using --deps you must specify an input file"
        raise UsageError(msg)

    settings = Settings.from_yaml(workdir)
    for config_file in settings.config_files:
        logger.debug(f"Loaded configuration from {config_file}")
    options = settings.compile_options(
        output_style=style,
        source_comments=line_comments,
        include_paths=tuple(include_path or ()),
    )
    engine = SettingsFactory(settings).engine()
    if file is None or str(file) == "-":
        exit_code = compile_stdin(
            engine, options, output_file=output, chunk_size=settings.chunk_size
        )
    else:
        exit_code = compile_file(
            engine, options, file, output_file=output, rules_file=deps
        )
    sys.exit(exit_code)
