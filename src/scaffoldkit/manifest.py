"""Module manifest and contribution data types."""

from __future__ import annotations

from typing import Any, Callable, Literal

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "ModuleContribution",
    "ModuleManifest",
    "ModuleQuestion",
    "ProviderContribution",
    "QuestionOption",
    "RouteContribution",
]


class ProviderContribution(BaseModel):
    """A generated-code provider reference.

    Attributes:
        name: Provider variable name.
        import_path: Import path of the file declaring the provider.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    import_path: str = Field(alias="importPath")


class RouteContribution(BaseModel):
    """A route contributed to the router configuration.

    Attributes:
        path: Route path, e.g. ``/login``.
        name: Route name for named navigation.
        import_path: Import path of the page the route opens.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path: str
    name: str
    import_path: str = Field(alias="importPath")


class ModuleContribution(BaseModel):
    """Everything a module adds to the generated project."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pubspec_dependencies: dict[str, str] = Field(default_factory=dict, alias="pubspecDependencies")
    pubspec_dev_dependencies: dict[str, str] = Field(default_factory=dict, alias="pubspecDevDependencies")
    providers: list[ProviderContribution] = Field(default_factory=list)
    routes: list[RouteContribution] = Field(default_factory=list)
    env_vars: list[str] = Field(default_factory=list, alias="envVars")


class QuestionOption(BaseModel):
    """A selectable answer for a ``select`` question."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    value: str
    label: str


class ModuleQuestion(BaseModel):
    """An interactive configuration question shown by front ends."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    message: str
    type: Literal["text", "select", "confirm"] = "text"
    options: list[QuestionOption] = Field(default_factory=list)
    default_value: str | bool | None = Field(default=None, alias="defaultValue")


class ModuleManifest(BaseModel):
    """Static declaration of a module.

    ``requires`` and ``conflicts_with`` hold module ids that are only checked
    when a selection is resolved. ``template_dir`` is passed through to
    renderers untouched.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str = ""
    description: str = ""
    requires: tuple[str, ...] = ()
    conflicts_with: tuple[str, ...] = Field(default=(), alias="conflictsWith")
    always_included: bool = Field(default=False, alias="alwaysIncluded")
    template_dir: str = Field(default="", alias="templateDir")
    phase: int = Field(default=2, ge=1, le=4)
    contributions: ModuleContribution = Field(default_factory=ModuleContribution)
    questions: list[ModuleQuestion] = Field(default_factory=list)
    is_enabled: Callable[[Any], bool] | None = Field(default=None, alias="isEnabled", exclude=True)

    def is_enabled_for(self, context: Any) -> bool:
        """Return whether the module contributes anything for ``context``."""
        if self.is_enabled is None:
            return True
        return bool(self.is_enabled(context))
