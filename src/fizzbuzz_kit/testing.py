"""pytest plugin for the project's test suites.

Load it from a conftest with ``pytest_plugins = ["fizzbuzz_kit.testing"]``.

It registers the tier markers used across ``tests/`` and adds exclusive-run
filtering: once any test or class in a module carries ``@pytest.mark.only``,
the unmarked tests of that module are deselected. Other modules are left
alone, so a stray ``only`` never silences the rest of the suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pytest

MARKERS = (
    "unit: Unit tests (<250ms)",
    "integration: Integration tests (<5s)",
    "quality: Quality tests (<30s)",
    "property: Hypothesis property tests",
    "only: Run only the marked tests/classes of this module",
)


def pytest_configure(config: pytest.Config) -> None:
    for marker in MARKERS:
        config.addinivalue_line("markers", marker)


def _module_id(item: pytest.Item) -> str:
    return item.nodeid.split("::", 1)[0]


def select_exclusive(
    items: list[pytest.Item],
) -> tuple[list[pytest.Item], list[pytest.Item]]:
    """Split ``items`` into (selected, deselected) according to ``only`` marks."""
    exclusive_modules = {
        _module_id(item) for item in items if item.get_closest_marker("only")
    }
    if not exclusive_modules:
        return list(items), []

    selected: list[pytest.Item] = []
    deselected: list[pytest.Item] = []
    for item in items:
        if _module_id(item) in exclusive_modules and not item.get_closest_marker(
            "only"
        ):
            deselected.append(item)
        else:
            selected.append(item)
    return selected, deselected


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    selected, deselected = select_exclusive(items)
    if deselected:
        config.hook.pytest_deselected(items=deselected)
        items[:] = selected
