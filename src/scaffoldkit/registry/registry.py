"""Central registry of known module manifests."""

from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Collection, Iterable

from scaffoldkit.definitions import BUILTIN_MANIFESTS
from scaffoldkit.errors import ExternalModuleError, NotFoundError
from scaffoldkit.manifest import ModuleManifest
from scaffoldkit.registry.loader import load_definition, scan_definitions
from scaffoldkit.registry.validation import validate_external_manifest

if TYPE_CHECKING:
    from scaffoldkit.config import Config

logger = logging.getLogger(__name__)

__all__ = ["Registry", "DEFAULT_DEFINITIONS_DIR"]

DEFAULT_DEFINITIONS_DIR = "./modules"

ExternalLoader = Callable[[str], Any]


class Registry:
    """Holds module manifests keyed by id, in registration order."""

    def __init__(
        self,
        config: Config | None = None,
        definitions_dir: str | Path | None = None,
    ) -> None:
        """Initialize the Registry.

        Args:
            config: Optional Config supplying ``modules.definitions_dir`` and ``modules.allow``.
            definitions_dir: Directory scanned by ``load_all()``. Overrides config.
        """
        if definitions_dir is not None:
            self._definitions_dir = Path(definitions_dir)
        elif config is not None:
            self._definitions_dir = Path(config.get("modules.definitions_dir", DEFAULT_DEFINITIONS_DIR))
        else:
            self._definitions_dir = Path(DEFAULT_DEFINITIONS_DIR)

        self._allow: list[str] | None = None
        if config is not None:
            allow = config.get("modules.allow")
            if allow is not None:
                self._allow = [str(name) for name in allow]

        self._modules: dict[str, ModuleManifest] = {}
        self._loaded = False

    @property
    def definitions_dir(self) -> Path:
        return self._definitions_dir

    # ----- Registration -----

    def register(self, manifest: ModuleManifest) -> None:
        """Register a manifest. An existing manifest with the same id is replaced."""
        if manifest.id in self._modules:
            logger.debug("Replacing registered module '%s'", manifest.id)
        self._modules[manifest.id] = manifest

    def register_all(self, manifests: Iterable[ModuleManifest]) -> None:
        for manifest in manifests:
            self.register(manifest)

    def register_builtins(self) -> None:
        """Register the built-in module table."""
        self.register_all(BUILTIN_MANIFESTS)

    # ----- Discovery -----

    def load_all(self, allow: Collection[str] | None = None) -> int:
        """Discover manifests from the definitions directory.

        Replaces the current contents. Malformed or missing definitions are
        skipped, never raised; a missing directory leaves the registry empty.

        Args:
            allow: Directory names permitted for discovery. Defaults to the
                configured ``modules.allow``; None means every directory.

        Returns:
            Number of manifests registered.
        """
        if allow is None:
            allow = self._allow

        discovered: dict[str, ModuleManifest] = {}
        for definition in scan_definitions(self._definitions_dir, allow=allow):
            manifest = load_definition(definition)
            if manifest is None:
                continue
            discovered[manifest.id] = manifest

        self._modules = discovered
        self._loaded = True

        if not discovered:
            logger.warning("No module definitions found in %s", self._definitions_dir)
        return len(discovered)

    def load_external(self, package_name: str, loader: ExternalLoader | None = None) -> ModuleManifest:
        """Import a package and register the manifest it exports.

        Raises:
            ExternalModuleError: If the package cannot be imported or its manifest is invalid.
        """
        effective_loader = loader if loader is not None else importlib.import_module
        try:
            exports = effective_loader(package_name)
        except Exception as e:
            raise ExternalModuleError(package_name, f"cannot import package: {e}", cause=e) from e

        if isinstance(exports, dict):
            value = exports.get("manifest")
        else:
            value = getattr(exports, "manifest", None)
        if value is None:
            raise ExternalModuleError(package_name, "package does not export 'manifest'")

        manifest = validate_external_manifest(value, package_name)
        self.register(manifest)
        return manifest

    # ----- Query Methods -----

    def get(self, module_id: str) -> ModuleManifest:
        """Look up a manifest by id.

        Raises:
            NotFoundError: If no manifest is registered under ``module_id``.
        """
        try:
            return self._modules[module_id]
        except KeyError:
            raise NotFoundError(module_id=module_id) from None

    def has(self, module_id: str) -> bool:
        """Check whether a manifest is registered."""
        return module_id in self._modules

    def get_all(self) -> list[ModuleManifest]:
        """All manifests in registration order."""
        return list(self._modules.values())

    def get_always_included(self) -> list[ModuleManifest]:
        return [m for m in self._modules.values() if m.always_included]

    def get_optional(self) -> list[ModuleManifest]:
        return [m for m in self._modules.values() if not m.always_included]

    def get_all_optional_ids(self) -> list[str]:
        """Ids of user-selectable modules, in registration order."""
        return [m.id for m in self.get_optional()]

    @property
    def size(self) -> int:
        """Number of registered manifests."""
        return len(self._modules)

    @property
    def is_loaded(self) -> bool:
        """Whether ``load_all()`` has completed."""
        return self._loaded

    def __len__(self) -> int:
        return len(self._modules)

    def __contains__(self, module_id: object) -> bool:
        return module_id in self._modules
