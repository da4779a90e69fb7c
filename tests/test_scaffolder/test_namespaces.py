"""Tests for NamespaceBuilder."""

from __future__ import annotations

import pytest

from abphelper.scaffolder.errors import InvalidPathError
from abphelper.scaffolder.namespaces import NamespaceBuilder

pytestmark = pytest.mark.unit


class TestViewNamespace:
    def test_lowers_first_character_only(self):
        assert NamespaceBuilder.view("App\\Main\\Views") == "app.Main.Views"

    def test_already_lower(self):
        assert NamespaceBuilder.view("App\\Main\\views\\order") == "app.Main.views.order"

    def test_single_segment(self):
        assert NamespaceBuilder.view("Orders") == "orders"

    def test_empty_rejected(self):
        with pytest.raises(InvalidPathError):
            NamespaceBuilder.view("")


class TestServiceNamespace:
    def test_prefixes_app_name(self):
        assert NamespaceBuilder.service("Acme", "Sales\\Orders") == "Acme.Sales.Orders"

    def test_keeps_casing(self):
        assert NamespaceBuilder.service("Acme", "sales") == "Acme.sales"

    def test_empty_folder_rejected(self):
        with pytest.raises(InvalidPathError):
            NamespaceBuilder.service("Acme", "")

    def test_empty_app_name_rejected(self):
        with pytest.raises(InvalidPathError):
            NamespaceBuilder.service("", "Sales")
