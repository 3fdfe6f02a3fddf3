"""Write make rules describing the files a stylesheet was compiled from.

The generated file looks like

    style.css : style.scss colors.scss _util.scss
    style.scss :
    colors.scss :
    _util.scss :

The rules without recipe keep make from failing when one of the prerequisites is \
later deleted or renamed. See <http://make.paulandlesley.org/autodep.html#norule>.
"""

from contextlib import suppress
from logging import getLogger
from os import pathsep, umask
from stat import S_IMODE
from pathlib import Path
from tempfile import NamedTemporaryFile

from .exceptions import DependencyFileError
from .models import DependencyList

_logger = getLogger(__name__)


def make_rules(
    dependencies: DependencyList, target: str, separator: str = pathsep
) -> str:
    prerequisites = dependencies.replace(separator, " ")
    lines = [f"{target} : {prerequisites}"]
    lines.extend(f"{prerequisite} :" for prerequisite in prerequisites.split(" "))
    return "".join(f"{line}\n" for line in lines)


def write_rules(
    dependencies: DependencyList,
    target: str,
    rules_file: Path,
    separator: str = pathsep,
) -> bool:
    """Write the make rules for `target` to `rules_file`.

    The rules are first written to a temporary file next to `rules_file`, then moved \
    in place: a failure never leaves a truncated or partially written rules file. An \
    existing rules file keeps its permissions, a new one gets the umask defaults.

    Args:
        dependencies: Prerequisites of `target`, joined by `separator`.
        target: Target of the main rule, usually the compiled output file.
        rules_file: Destination of the rules.
        separator: Separator used in `dependencies`.

    Raises:
        DependencyFileError: Raised if the rules cannot be written.

    Returns:
        False if there was no dependency and thus nothing was written, True otherwise.
    """
    if not dependencies:
        return False
    content = make_rules(dependencies, target, separator)
    temporary_path: Path | None = None
    try:
        with NamedTemporaryFile(
            "w",
            encoding="utf8",
            newline="",
            dir=rules_file.parent,
            prefix=f".{rules_file.name}.",
            delete=False,
        ) as fh:
            temporary_path = Path(fh.name)
            fh.write(content)
        temporary_path.chmod(_file_mode(rules_file))
        temporary_path.replace(rules_file)
    except OSError as e:
        msg = f"error writing dependency file {rules_file}: {e.strerror or e}"
        raise DependencyFileError(msg) from e
    finally:
        if temporary_path is not None:
            with suppress(FileNotFoundError):
                temporary_path.unlink()
    _logger.debug("Wrote make rules for %s to %s", target, rules_file)
    return True


def _file_mode(path: Path) -> int:
    try:
        return S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        current_umask = umask(0)
        umask(current_umask)
        return 0o666 & ~current_umask
