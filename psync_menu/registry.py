"""Data source discovery utilities."""

from __future__ import annotations

import importlib
from pathlib import Path

from psync_menu.datasource.demo import demo_source
from psync_menu.datasource.memory import InMemoryDataSource


REQUIRED_SOURCE_METHODS = (
    "subject_count",
    "subject",
    "snapshot_count",
    "snapshot",
)


def _validate_source(source: object, reference: str) -> None:
    for method_name in REQUIRED_SOURCE_METHODS:
        if not callable(getattr(source, method_name, None)):
            raise TypeError(f"data source '{reference}' is missing required method: {method_name}")

    count = source.subject_count()
    if not isinstance(count, int) or count < 0:
        raise TypeError(f"data source '{reference}': subject_count() must return a non-negative int")


def _import_factory(reference: str) -> object:
    module_name, _, attr = reference.partition(":")
    if not module_name or not attr:
        raise ValueError(f"expected 'package.module:factory', got '{reference}'")
    module = importlib.import_module(module_name)
    factory = getattr(module, attr)
    return factory() if callable(factory) else factory


def load_data_source(reference: str = "demo") -> object:
    """Resolve `demo`, a `.json` dump, or a `module:factory` reference."""
    if reference == "demo":
        source = demo_source()
    elif reference.endswith(".json"):
        path = Path(reference)
        if not path.is_file():
            raise ValueError(f"data source file not found: {reference}")
        source = InMemoryDataSource.from_json(path)
    elif ":" in reference:
        source = _import_factory(reference)
    else:
        raise ValueError(f"unknown data source '{reference}'")

    _validate_source(source, reference)
    return source
