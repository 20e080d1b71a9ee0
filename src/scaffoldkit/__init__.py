"""scaffoldkit - module registry, dependency resolution and contribution composition."""

from __future__ import annotations

# Core
from scaffoldkit.registry import Registry
from scaffoldkit.resolver import ModuleResolver, ResolvedSet
from scaffoldkit.composer import (
    CompositionResult,
    ModuleComposer,
    compose,
    format_pubspec_dependencies,
    generate_app_providers_barrel,
    pick_newer_version,
)

# Manifest types
from scaffoldkit.manifest import (
    ModuleContribution,
    ModuleManifest,
    ModuleQuestion,
    ProviderContribution,
    QuestionOption,
    RouteContribution,
)
from scaffoldkit.context import ProjectContext

# Config
from scaffoldkit.config import Config

# Errors
from scaffoldkit.errors import (
    CircularDependencyError,
    ConfigError,
    ErrorCodes,
    ExternalModuleError,
    MissingDependencyError,
    ModuleConflictError,
    ModuleError,
    ModuleNotFoundError,
    NotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Registry",
    "ModuleResolver",
    "ResolvedSet",
    "ModuleComposer",
    "CompositionResult",
    "compose",
    "format_pubspec_dependencies",
    "generate_app_providers_barrel",
    "pick_newer_version",
    # Manifest types
    "ModuleManifest",
    "ModuleContribution",
    "ModuleQuestion",
    "QuestionOption",
    "ProviderContribution",
    "RouteContribution",
    "ProjectContext",
    # Config
    "Config",
    # Errors
    "ErrorCodes",
    "ModuleError",
    "ConfigError",
    "NotFoundError",
    "ModuleNotFoundError",
    "MissingDependencyError",
    "CircularDependencyError",
    "ModuleConflictError",
    "ExternalModuleError",
]
