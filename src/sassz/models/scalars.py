"""Model NewTypes to disambiguate multi-usage types."""

from typing import NewType

DependencyList = NewType("DependencyList", str)
"""Derived from str to represent the paths imported during a compilation.

The paths are joined by the platform path-list separator (`os.pathsep`), the same \
way the engine reports them. The entry file comes first.
"""
