"""Tests that every tabsql module loads."""

import importlib
import pkgutil

import pytest

import tabsql

MODULES = sorted(
    info.name for info in pkgutil.walk_packages(tabsql.__path__, prefix="tabsql.")
)


class TestPackageImports:
    """Tests for module loading."""

    @pytest.mark.parametrize("module_name", MODULES)
    def test_module_imports(self, module_name):
        assert importlib.import_module(module_name) is not None

    def test_dialects_reachable_from_package(self):
        dialect = tabsql.get_dialect("iris")
        assert dialect.quote_identifier("order id") == '"order id"'
        assert dialect.supports_live_execution()
