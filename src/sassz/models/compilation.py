from dataclasses import dataclass, field
from enum import Enum, IntEnum
from pathlib import Path

from .scalars import DependencyList


class OutputStyle(Enum):
    Nested = "nested"
    Expanded = "expanded"
    Compact = "compact"
    Compressed = "compressed"


class ExitCode(IntEnum):
    Success = 0
    Failure = 1
    InternalError = 2


@dataclass(frozen=True)
class CompileOptions:
    output_style: OutputStyle = OutputStyle.Nested
    source_comments: bool = False
    include_paths: tuple[str, ...] = ()
    image_path: str = "images"


@dataclass(frozen=True)
class FileSource:
    path: Path


@dataclass(frozen=True)
class StringSource:
    text: str


@dataclass(frozen=True)
class CompileRequest:
    source: FileSource | StringSource
    options: CompileOptions = field(default_factory=CompileOptions)


@dataclass(frozen=True)
class CompileFailure:
    message: str | None = None


@dataclass(frozen=True)
class CompileSuccess:
    output: str
    dependencies: DependencyList | None = None


@dataclass(frozen=True)
class CompileEmpty:
    """The engine reported neither an error nor any output."""


CompileResult = CompileFailure | CompileSuccess | CompileEmpty
