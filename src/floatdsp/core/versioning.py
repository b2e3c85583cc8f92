"""Installed versions and the command line recorded with each pipeline run."""

from __future__ import annotations

import importlib.metadata
import shlex

# distributions whose versions can change a run's numbers or artefacts
RUNTIME_DISTRIBUTIONS = ("floatdsp", "numpy", "pandas", "PyYAML", "matplotlib")


def dependency_versions(names: tuple[str, ...] = RUNTIME_DISTRIBUTIONS) -> dict[str, str | None]:
    """Map each distribution name to its installed version, ``None`` if absent."""

    versions: dict[str, str | None] = {}
    for name in names:
        try:
            versions[name] = importlib.metadata.version(name)
        except importlib.metadata.PackageNotFoundError:
            versions[name] = None
    return versions


def invocation_string(argv: list[str]) -> str:
    return shlex.join(["floatdsp", *argv]) if argv else ""
