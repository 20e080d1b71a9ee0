"""Built-in module manifests.

This table is the default registration path (see ``Registry.register_builtins``).
Directory discovery is only used for modules shipped outside this package.
"""

from __future__ import annotations

from typing import Any, Callable

from scaffoldkit.manifest import (
    ModuleContribution,
    ModuleManifest,
    ModuleQuestion,
    ProviderContribution,
    QuestionOption,
    RouteContribution,
)

__all__ = ["BUILTIN_MANIFESTS"]


def _enabled_when(key: str) -> Callable[[Any], bool]:
    """Build a predicate that is False only when ``context.modules[key]`` is False."""

    def predicate(context: Any) -> bool:
        if isinstance(context, dict):
            modules = context.get("modules") or {}
        else:
            modules = getattr(context, "modules", None) or {}
        return modules.get(key) is not False

    predicate.__name__ = f"{key.replace('-', '_')}_enabled"
    return predicate


def _option(value: str, label: str) -> QuestionOption:
    return QuestionOption(value=value, label=label)


CORE = ModuleManifest(
    id="core",
    name="Core",
    description="Base Clean Architecture structure with Riverpod state management and go_router navigation",
    template_dir="templates/core",
    phase=1,
    always_included=True,
    contributions=ModuleContribution(
        pubspec_dependencies={
            "flutter_riverpod": "^2.6.1",
            "riverpod_annotation": "^2.6.1",
            "go_router": "^14.6.2",
            "freezed_annotation": "^2.4.4",
            "json_annotation": "^4.9.0",
        },
        pubspec_dev_dependencies={
            "build_runner": "^2.4.13",
            "riverpod_generator": "^2.6.3",
            "go_router_builder": "^2.7.1",
            "freezed": "^2.5.7",
            "json_serializable": "^6.8.0",
            "flutter_lints": "^5.0.0",
        },
    ),
)

API = ModuleManifest(
    id="api",
    name="API Client",
    description="HTTP client setup with Dio, interceptors, and typed error handling",
    template_dir="templates/modules/api",
    questions=[
        ModuleQuestion(
            id="baseUrl",
            message="What is your API base URL? (leave empty for placeholder)",
            type="text",
            default_value="https://api.example.com",
        ),
    ],
    contributions=ModuleContribution(
        pubspec_dependencies={
            "dio": "^5.7.0",
            "retrofit": "^4.4.1",
            "json_annotation": "^4.9.0",
        },
        pubspec_dev_dependencies={
            "retrofit_generator": "^9.1.5",
            "json_serializable": "^6.9.0",
        },
        providers=[
            ProviderContribution(
                name="dioClientProvider",
                import_path="../../features/api/presentation/providers/api_provider.dart",
            ),
        ],
        env_vars=["API_BASE_URL"],
    ),
    is_enabled=_enabled_when("api"),
)

AUTH = ModuleManifest(
    id="auth",
    name="Authentication",
    description="User authentication with login, register, and session management",
    template_dir="templates/modules/auth",
    questions=[
        ModuleQuestion(
            id="provider",
            message="Which authentication provider do you want to use?",
            type="select",
            options=[
                _option("firebase", "Firebase Auth"),
                _option("supabase", "Supabase Auth"),
                _option("custom", "Custom backend"),
            ],
            default_value="firebase",
        ),
    ],
    contributions=ModuleContribution(
        pubspec_dependencies={
            "firebase_core": "^3.8.0",
            "firebase_auth": "^5.3.4",
        },
        providers=[
            ProviderContribution(
                name="authRepositoryProvider",
                import_path="../../features/auth/presentation/providers/auth_provider.dart",
            ),
        ],
        routes=[
            RouteContribution(
                path="/login",
                name="login",
                import_path="../../features/auth/presentation/pages/login_page.dart",
            ),
            RouteContribution(
                path="/register",
                name="register",
                import_path="../../features/auth/presentation/pages/register_page.dart",
            ),
        ],
    ),
    is_enabled=_enabled_when("auth"),
)

DATABASE = ModuleManifest(
    id="database",
    name="Database",
    description="Local database with drift, hive, or isar",
    template_dir="templates/modules/database",
    questions=[
        ModuleQuestion(
            id="engine",
            message="Which local database engine do you want to use?",
            type="select",
            options=[
                _option("drift", "Drift (SQLite)"),
                _option("hive", "Hive"),
                _option("isar", "Isar"),
            ],
            default_value="drift",
        ),
    ],
    contributions=ModuleContribution(
        pubspec_dependencies={
            "drift": "^2.22.1",
            "sqlite3_flutter_libs": "^0.5.28",
            "path_provider": "^2.1.5",
            "path": "^1.9.0",
        },
        pubspec_dev_dependencies={"drift_dev": "^2.22.1"},
        providers=[
            ProviderContribution(
                name="databaseProvider",
                import_path="../../features/database/presentation/providers/database_provider.dart",
            ),
        ],
    ),
    is_enabled=_enabled_when("database"),
)

THEME = ModuleManifest(
    id="theme",
    name="Theme",
    description="Advanced Material 3 theming with seed colors, dark/light mode switching via Riverpod",
    template_dir="templates/modules/theme",
    questions=[
        ModuleQuestion(id="seedColor", message="Seed color (hex, e.g. #6750A4)", type="text"),
        ModuleQuestion(id="darkMode", message="Enable dark mode support?", type="confirm", default_value=True),
    ],
    contributions=ModuleContribution(
        pubspec_dependencies={"google_fonts": "^6.2.1"},
        providers=[
            ProviderContribution(
                name="appThemeModeProvider",
                import_path="../../core/theme/theme_provider.dart",
            ),
        ],
    ),
    is_enabled=_enabled_when("theme"),
)

I18N = ModuleManifest(
    id="i18n",
    name="Internationalization",
    description="Multi-language support with ARB files and Flutter localization",
    template_dir="templates/modules/i18n",
    questions=[
        ModuleQuestion(id="defaultLocale", message="Default locale", type="text", default_value="en"),
    ],
    contributions=ModuleContribution(
        pubspec_dependencies={
            "flutter_localizations": "sdk: flutter",
            "intl": "^0.19.0",
        },
        providers=[
            ProviderContribution(name="localeProvider", import_path="../../core/l10n/l10n_provider.dart"),
        ],
    ),
    is_enabled=_enabled_when("i18n"),
)

PUSH = ModuleManifest(
    id="push",
    name="Push Notifications",
    description="Push notification support via Firebase Cloud Messaging or OneSignal",
    template_dir="templates/modules/push",
    questions=[
        ModuleQuestion(
            id="provider",
            message="Which push notification provider do you want to use?",
            type="select",
            options=[
                _option("firebase", "Firebase Cloud Messaging"),
                _option("onesignal", "OneSignal"),
            ],
            default_value="firebase",
        ),
    ],
    contributions=ModuleContribution(
        pubspec_dependencies={"firebase_messaging": "^15.1.6"},
        providers=[
            ProviderContribution(
                name="pushNotificationProvider",
                import_path="../../features/push/presentation/providers/push_provider.dart",
            ),
        ],
    ),
    is_enabled=_enabled_when("push"),
)

ANALYTICS = ModuleManifest(
    id="analytics",
    name="Analytics",
    description="Analytics event tracking and route observation via Firebase Analytics",
    template_dir="templates/modules/analytics",
    contributions=ModuleContribution(
        pubspec_dependencies={"firebase_analytics": "^11.3.6"},
        providers=[
            ProviderContribution(
                name="analyticsProvider",
                import_path="../../features/analytics/presentation/providers/analytics_provider.dart",
            ),
        ],
    ),
    is_enabled=_enabled_when("analytics"),
)

CICD = ModuleManifest(
    id="cicd",
    name="CI/CD",
    description="Continuous integration and deployment pipeline configuration",
    template_dir="templates/modules/cicd",
    questions=[
        ModuleQuestion(
            id="provider",
            message="Which CI/CD provider do you use?",
            type="select",
            options=[
                _option("github", "GitHub Actions"),
                _option("gitlab", "GitLab CI"),
                _option("bitbucket", "Bitbucket Pipelines"),
            ],
            default_value="github",
        ),
    ],
    is_enabled=_enabled_when("cicd"),
)

DEEP_LINKING = ModuleManifest(
    id="deep-linking",
    name="Deep Linking",
    description="Deep link and universal link handling via app_links with go_router integration",
    template_dir="templates/modules/deep-linking",
    questions=[
        ModuleQuestion(id="scheme", message="Custom URL scheme (e.g. myapp)", type="text"),
        ModuleQuestion(id="host", message="Universal link host (e.g. example.com)", type="text"),
    ],
    contributions=ModuleContribution(
        pubspec_dependencies={"app_links": "^6.3.3"},
        providers=[
            ProviderContribution(
                name="deepLinkProvider",
                import_path="../../features/deep_linking/presentation/providers/deep_link_provider.dart",
            ),
        ],
        routes=[
            RouteContribution(
                path="/deep-link",
                name="deepLink",
                import_path="../../features/deep_linking/presentation/pages/deep_link_page.dart",
            ),
        ],
    ),
    is_enabled=_enabled_when("deepLinking"),
)

BUILTIN_MANIFESTS: tuple[ModuleManifest, ...] = (
    CORE,
    API,
    AUTH,
    DATABASE,
    THEME,
    I18N,
    PUSH,
    ANALYTICS,
    CICD,
    DEEP_LINKING,
)
