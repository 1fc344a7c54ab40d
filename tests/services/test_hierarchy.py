"""Tests for HierarchyService."""

from __future__ import annotations

from pathlib import Path

import pytest

from domainctl.config.models import HierarchyConfig, IdnaConfig
from domainctl.config.settings import DomainSettings
from domainctl.services.hierarchy import HierarchyService


@pytest.fixture
def svc(settings: DomainSettings) -> HierarchyService:
    return HierarchyService(settings)


class TestParent:
    def test_parent(self, svc: HierarchyService) -> None:
        result = svc.parent("mail.example.com")
        assert result.ok
        assert result.data == {"name": "mail.example.com", "parent": "example.com", "tier": "strict"}

    def test_tld_has_no_parent(self, svc: HierarchyService) -> None:
        result = svc.parent("com")
        assert result.ok
        assert result.data["parent"] is None
        assert result.data["tier"] is None

    def test_literal_fails(self, svc: HierarchyService) -> None:
        result = svc.parent("[192.168.1.1]")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "CONVERSION_FAILURE"
        assert result.error.detail == {"from_tier": "transport", "target": "parent domain"}

    def test_rendered_in_unicode(self, tmp_path: Path) -> None:
        settings = DomainSettings.from_cli(start=tmp_path, idna=IdnaConfig(output_form="unicode"))
        result = HierarchyService(settings).parent("www.xn--caf-dma.com")
        assert result.data["parent"] == "café.com"


class TestRoot:
    def test_root(self, svc: HierarchyService) -> None:
        result = svc.root("a.b.example.com")
        assert result.data["root"] == "example.com"

    def test_single_label(self, svc: HierarchyService) -> None:
        assert svc.root("localhost").data["root"] is None

    def test_literal_fails(self, svc: HierarchyService) -> None:
        result = svc.root("[10.0.0.1]")
        assert result.error is not None
        assert result.error.detail["target"] == "root domain"


class TestWalk:
    def test_walk(self, svc: HierarchyService) -> None:
        result = svc.walk("api.123.example.com")
        assert result.ok
        assert result.data["count"] == 4
        assert result.data["items"] == [
            {"name": "api.123.example.com", "tier": "permissive"},
            {"name": "123.example.com", "tier": "permissive"},
            {"name": "example.com", "tier": "strict"},
            {"name": "com", "tier": "strict"},
        ]

    def test_literal_fails(self, svc: HierarchyService) -> None:
        assert not svc.walk("[10.0.0.1]").ok


class TestAddSubdomain:
    def test_add(self, svc: HierarchyService) -> None:
        result = svc.add_subdomain("example.com", ["api", "v1"])
        assert result.ok
        assert result.data["subdomain"] == "api.v1.example.com"
        assert result.data["tier"] == "strict"
        assert result.warnings == []

    def test_strict_rejects_numeric_label(self, svc: HierarchyService) -> None:
        result = svc.add_subdomain("example.com", ["123"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "CANNOT_CREATE_SUBDOMAIN"

    def test_downgrade_argument(self, svc: HierarchyService) -> None:
        result = svc.add_subdomain("example.com", ["123"], allow_downgrade=True)
        assert result.ok
        assert result.data["tier"] == "permissive"
        assert len(result.warnings) == 1
        assert "downgraded" in result.warnings[0]

    def test_downgrade_from_config(self, tmp_path: Path) -> None:
        settings = DomainSettings.from_cli(
            start=tmp_path, hierarchy=HierarchyConfig(allow_downgrade=True)
        )
        result = HierarchyService(settings).add_subdomain("example.com", ["123"])
        assert result.ok
        assert result.data["subdomain"] == "123.example.com"

    def test_argument_overrides_config(self, tmp_path: Path) -> None:
        settings = DomainSettings.from_cli(
            start=tmp_path, hierarchy=HierarchyConfig(allow_downgrade=True)
        )
        result = HierarchyService(settings).add_subdomain(
            "example.com", ["123"], allow_downgrade=False
        )
        assert not result.ok

    def test_literal_fails(self, svc: HierarchyService) -> None:
        result = svc.add_subdomain("[192.168.1.1]", ["www"])
        assert result.error is not None
        assert result.error.code == "CANNOT_CREATE_SUBDOMAIN"

    def test_no_labels(self, svc: HierarchyService) -> None:
        assert not svc.add_subdomain("example.com", []).ok


class TestIsSubdomain:
    def test_true(self, svc: HierarchyService) -> None:
        result = svc.is_subdomain("mail.example.com", "example.com")
        assert result.data["is_subdomain"] is True

    def test_false_for_self(self, svc: HierarchyService) -> None:
        assert svc.is_subdomain("example.com", "example.com").data["is_subdomain"] is False

    def test_invalid_input(self, svc: HierarchyService) -> None:
        result = svc.is_subdomain("mail.example.com", "host@name.com")
        assert not result.ok
