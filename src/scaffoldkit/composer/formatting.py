"""Text helpers whose exact output renderers depend on."""

from __future__ import annotations

from typing import Iterable, Mapping

from scaffoldkit.manifest import ProviderContribution

__all__ = [
    "ROUTER_IMPORT_PATH",
    "format_pubspec_dependencies",
    "generate_app_providers_barrel",
]

ROUTER_IMPORT_PATH = "../router/app_router.dart"


def format_pubspec_dependencies(dependencies: Mapping[str, str]) -> str:
    """Render ``name: version`` lines, two-space indented, sorted by name.

    No trailing newline; an empty mapping gives an empty string.
    """
    return "\n".join(f"  {name}: {dependencies[name]}" for name in sorted(dependencies))


def generate_app_providers_barrel(providers: Iterable[ProviderContribution]) -> str:
    """Render the global providers barrel file.

    The router export always comes first; every other import path is exported
    once. The text ends with exactly one newline.
    """
    paths: dict[str, None] = {ROUTER_IMPORT_PATH: None}
    for provider in providers:
        paths.setdefault(provider.import_path, None)
    return "".join(f"export '{path}';\n" for path in paths)
