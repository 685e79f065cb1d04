"""Dependency planning: which npm packages a configuration needs.

Everything here is pure.  :func:`get_dependencies` maps a
:class:`~create_frontend_app.models.ProjectConfig` to ordered runtime and
development package lists, and the command helpers turn those lists into
package-manager argument vectors.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..models import (
    BuildTool,
    FetchingLibrary,
    PackageManager,
    ProjectConfig,
    StateManagement,
    TechStack,
    UILibrary,
)


CORE_DEPENDENCIES: tuple[str, ...] = (
    "eslint",
    "prettier",
    "husky",
    "typescript",
    "lighthouse",
    "dayjs",
    "zod",
)

CORE_DEV_DEPENDENCIES: tuple[str, ...] = (
    "@types/node",
    "@types/react",
    "@types/react-dom",
    "eslint-plugin-prettier",
    "eslint-config-prettier",
)

TECH_STACK_DEPENDENCIES: dict[TechStack, tuple[str, ...]] = {
    TechStack.REACT: ("react", "react-dom"),
    TechStack.NEXTJS: ("next", "react", "react-dom"),
}

VITE_DEV_DEPENDENCIES: tuple[str, ...] = ("vite", "@vitejs/plugin-react")

UI_LIBRARY_DEPENDENCIES: dict[UILibrary, tuple[str, ...]] = {
    UILibrary.MANTINE: ("@mantine/core", "@mantine/hooks", "@mantine/notifications"),
    UILibrary.TAILWIND_SHADCN: ("tailwindcss", "postcss", "autoprefixer"),
}

STATE_MANAGEMENT_DEPENDENCIES: dict[StateManagement, tuple[str, ...]] = {
    StateManagement.ZUSTAND: ("zustand",),
    StateManagement.NONE: (),
}

FETCHING_LIBRARY_DEPENDENCIES: dict[FetchingLibrary, tuple[str, ...]] = {
    FetchingLibrary.REACT_QUERY: ("@tanstack/react-query",),
    FetchingLibrary.APOLLO: ("@apollo/client", "graphql"),
    FetchingLibrary.NONE: (),
}


@dataclass(frozen=True)
class DependencySet:
    """Runtime and development package names, in install order."""

    dependencies: list[str] = field(default_factory=list)
    dev_dependencies: list[str] = field(default_factory=list)


def get_dependencies(config: ProjectConfig) -> DependencySet:
    """Plan the packages to install for *config*.

    Lists are built by appending groups in a fixed order (core, framework,
    UI library, state management, data fetching).  Duplicates are left in
    place; package managers install them idempotently.
    """
    dependencies = list(CORE_DEPENDENCIES)
    dev_dependencies = list(CORE_DEV_DEPENDENCIES)

    dependencies.extend(TECH_STACK_DEPENDENCIES[config.tech_stack])
    if config.tech_stack is TechStack.REACT and config.build_tool is BuildTool.VITE:
        dev_dependencies.extend(VITE_DEV_DEPENDENCIES)

    dependencies.extend(UI_LIBRARY_DEPENDENCIES[config.ui_library])
    dependencies.extend(STATE_MANAGEMENT_DEPENDENCIES[config.state_management])
    dependencies.extend(FETCHING_LIBRARY_DEPENDENCIES[config.fetching_library])

    return DependencySet(dependencies=dependencies, dev_dependencies=dev_dependencies)


# ---------------------------------------------------------------------------
# Package-manager commands
# ---------------------------------------------------------------------------

_ADD_VERB: dict[PackageManager, str] = {
    PackageManager.NPM: "install",
    PackageManager.YARN: "add",
    PackageManager.PNPM: "add",
}


def install_commands(
    package_manager: PackageManager, deps: DependencySet
) -> tuple[list[str], list[str]]:
    """Return ``(install_argv, dev_install_argv)`` for *package_manager*.

    Examples::

        npm  -> ["npm", "install", ...], ["npm", "install", "-D", ...]
        yarn -> ["yarn", "add", ...],    ["yarn", "add", "-D", ...]
    """
    verb = _ADD_VERB[package_manager]
    binary = package_manager.value
    return (
        [binary, verb, *deps.dependencies],
        [binary, verb, "-D", *deps.dev_dependencies],
    )


def fallback_install_command(package_manager: PackageManager) -> list[str]:
    """Generic "install from manifest" command with no explicit package list."""
    return [package_manager.value, "install"]
