import sys
from logging import INFO, basicConfig, getLogger

from cyclopts import App
from rich.console import Console
from rich.logging import RichHandler

from .. import __version__, app_name
from ..exceptions import SasszError, UsageError

app = App(name=app_name, version=__version__, help_flags=["--help", "-h"])

_logger = getLogger(__name__)


def main() -> None:
    basicConfig(
        level=INFO,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                tracebacks_show_locals=False,
            )
        ],
    )
    from ..utils import import_module_and_submodules

    import_module_and_submodules(__name__)
    try:
        app()
    except UsageError as e:
        _logger.critical("%s. See '%s -h'", e, app_name)
        sys.exit(e.exit_code)
    except SasszError as e:
        _logger.critical(str(e))
        sys.exit(e.exit_code)
