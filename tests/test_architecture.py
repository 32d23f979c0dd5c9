"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters
- Adapters can depend on domain
- The CLI is the only caller wiring adapters together
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should only import the standard library and the domain itself."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("bart_client.domain.models*")
        .should_not_import("bart_client.adapters*")
        .should_not_import("bart_client.domain.ports*")
        .should_not_import("bart_client.cli")
        .may_import("bart_client.domain.models*")
        .check("bart_client")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("bart_client.domain.ports*")
        .should_not_import("bart_client.adapters*")
        .should_not_import("bart_client.cli")
        .may_import("bart_client.domain.ports*")
        .may_import("bart_client.domain.models*")
        .check("bart_client")
    )


def test_no_circular_dependencies_in_domain() -> None:
    """Domain layer should not have circular dependencies."""
    (
        archrule("domain no cycles", comment="Domain layer should not depend on outer layers")
        .match("bart_client.domain*")
        .should_not_import("bart_client.adapters*")
        .should_not_import("bart_client.cli")
        .may_import("bart_client.domain*")
        .check("bart_client", only_direct_imports=True)
    )


def test_adapters_dont_import_cli() -> None:
    """Adapters should not import the CLI (to avoid cycles)."""
    (
        archrule("adapters independence", comment="Adapters should not depend on the CLI")
        .match("bart_client.adapters*")
        .should_not_import("bart_client.cli")
        .may_import("bart_client.domain*")
        .may_import("bart_client.adapters*")
        .check("bart_client", only_direct_imports=True)
    )


def test_parsers_dont_do_http() -> None:
    """Parsers decode documents only and should not import the HTTP client."""
    (
        archrule("parsers", comment="Parsers should not depend on the HTTP client")
        .match("bart_client.adapters.bart_api.*_parser")
        .should_not_import("bart_client.adapters.bart_api.http_client")
        .check("bart_client", only_direct_imports=True)
    )
