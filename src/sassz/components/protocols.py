from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..models import CompileRequest, CompileResult


class EngineProtocol(Protocol):
    """Turn a stylesheet source into compiled output.

    Implementations never raise on a compilation problem: every outcome is \
    encoded in the returned [`CompileResult`][sassz.models.CompileResult].
    """

    def compile(self, request: "CompileRequest") -> "CompileResult": ...


class SettingsFactoryProtocol(Protocol):
    def engine(self) -> EngineProtocol: ...
