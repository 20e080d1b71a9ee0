"""Tests for the pubspec and provider-barrel text helpers."""

from __future__ import annotations

from scaffoldkit.composer.formatting import (
    ROUTER_IMPORT_PATH,
    format_pubspec_dependencies,
    generate_app_providers_barrel,
)
from scaffoldkit.manifest import ProviderContribution


def _provider(name: str, path: str) -> ProviderContribution:
    return ProviderContribution(name=name, import_path=path)


class TestFormatPubspecDependencies:
    def test_sorted_two_space_indent(self) -> None:
        result = format_pubspec_dependencies({"go_router": "^14.6.2", "dio": "^5.4.0"})
        assert result == "  dio: ^5.4.0\n  go_router: ^14.6.2"

    def test_empty(self) -> None:
        assert format_pubspec_dependencies({}) == ""

    def test_no_trailing_newline(self) -> None:
        assert not format_pubspec_dependencies({"intl": "^0.19.0"}).endswith("\n")

    def test_non_caret_values_verbatim(self) -> None:
        assert format_pubspec_dependencies({"flutter_localizations": "sdk: flutter"}) == (
            "  flutter_localizations: sdk: flutter"
        )


class TestGenerateAppProvidersBarrel:
    def test_router_only(self) -> None:
        assert generate_app_providers_barrel([]) == f"export '{ROUTER_IMPORT_PATH}';\n"

    def test_router_first_then_providers_in_order(self) -> None:
        barrel = generate_app_providers_barrel(
            [_provider("auth", "../../auth.dart"), _provider("api", "../../api.dart")]
        )
        assert barrel.splitlines() == [
            f"export '{ROUTER_IMPORT_PATH}';",
            "export '../../auth.dart';",
            "export '../../api.dart';",
        ]

    def test_duplicate_paths_exported_once(self) -> None:
        barrel = generate_app_providers_barrel(
            [_provider("a", "../../x.dart"), _provider("b", "../../x.dart")]
        )
        assert barrel.count("x.dart") == 1

    def test_router_path_among_providers_not_repeated(self) -> None:
        barrel = generate_app_providers_barrel([_provider("routerProvider", ROUTER_IMPORT_PATH)])
        assert barrel.count(ROUTER_IMPORT_PATH) == 1

    def test_single_trailing_newline(self) -> None:
        barrel = generate_app_providers_barrel([_provider("a", "../../a.dart")])
        assert barrel.endswith(";\n")
        assert not barrel.endswith("\n\n")
