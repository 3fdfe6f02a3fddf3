"""Model classes shared by the different parts of sassz.

- [`compilation`][sassz.models.compilation] contains the requests handed to the \
    engine and the results it hands back
- [`scalars`][sassz.models.scalars] contains NewTypes that help disambiguate plain \
    strings used in different contexts
"""

from .compilation import (
    CompileEmpty,
    CompileFailure,
    CompileOptions,
    CompileRequest,
    CompileResult,
    CompileSuccess,
    ExitCode,
    FileSource,
    OutputStyle,
    StringSource,
)
from .scalars import DependencyList

__all__ = [
    "CompileEmpty",
    "CompileFailure",
    "CompileOptions",
    "CompileRequest",
    "CompileResult",
    "CompileSuccess",
    "DependencyList",
    "ExitCode",
    "FileSource",
    "OutputStyle",
    "StringSource",
]
