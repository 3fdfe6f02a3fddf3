from typing import TYPE_CHECKING

from .protocols import EngineProtocol, SettingsFactoryProtocol

if TYPE_CHECKING:
    from ..configuring.settings import Settings


class SettingsFactory(SettingsFactoryProtocol):
    def __init__(self, settings: "Settings") -> None:
        self._settings = settings

    def engine(self) -> EngineProtocol:
        from .engine import LibsassEngine

        return LibsassEngine(precision=self._settings.precision)
