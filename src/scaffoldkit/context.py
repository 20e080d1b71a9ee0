"""Project context handed to module ``is_enabled`` predicates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = ["ProjectContext"]


@dataclass(frozen=True)
class ProjectContext:
    """Resolved project settings seen by the built-in module predicates.

    ``modules`` maps a module key to ``False`` (disabled) or to a dict of the
    module's options. Keys that are absent count as enabled.
    """

    project_name: str = ""
    org_id: str = ""
    description: str = ""
    platforms: list[str] = field(default_factory=list)
    modules: dict[str, Any] = field(default_factory=dict)

    def is_module_enabled(self, key: str) -> bool:
        """Return False only when ``key`` is explicitly set to False."""
        return self.modules.get(key) is not False
