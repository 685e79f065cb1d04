"""Stage 3: generate tool configuration files.

Each generator writes at most one file and returns ``True`` on success (or
when the file does not apply to the configuration).  The generators share no
state, so :func:`create_config_files` runs them concurrently.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from jinja2 import TemplateError

from ..models import EntryLayout, ProjectConfig, TechStack
from ..utils import console, print_error, print_step, print_warning, write_json_file
from .templates import TemplateRenderer, build_context


def tsconfig_content(config: ProjectConfig) -> dict[str, Any]:
    """TypeScript compiler options; JSX handling depends on the framework."""
    return {
        "compilerOptions": {
            "target": "ES2020",
            "lib": ["dom", "dom.iterable", "esnext"],
            "allowJs": True,
            "skipLibCheck": True,
            "esModuleInterop": True,
            "allowSyntheticDefaultImports": True,
            "strict": True,
            "forceConsistentCasingInFileNames": True,
            "noFallthroughCasesInSwitch": True,
            "module": "esnext",
            "moduleResolution": "node",
            "resolveJsonModule": True,
            "isolatedModules": True,
            "noEmit": True,
            "jsx": "react-jsx" if config.tech_stack is TechStack.REACT else "preserve",
            "incremental": True,
            "baseUrl": ".",
            "paths": {"@/*": ["./src/*"]},
        },
        "include": ["src/**/*"],
        "exclude": ["node_modules", "dist", "build"],
    }


ESLINT_CONFIG: dict[str, Any] = {
    "extends": [
        "eslint:recommended",
        "plugin:react/recommended",
        "plugin:react-hooks/recommended",
        "plugin:prettier/recommended",
    ],
    "plugins": ["react", "react-hooks", "prettier"],
    "rules": {
        "prettier/prettier": "error",
        "react/react-in-jsx-scope": "off",
        "react/prop-types": "off",
        "react-hooks/rules-of-hooks": "error",
        "react-hooks/exhaustive-deps": "warn",
    },
    "parserOptions": {
        "ecmaVersion": 2021,
        "sourceType": "module",
        "ecmaFeatures": {"jsx": True},
    },
    "settings": {"react": {"version": "detect"}},
    "env": {"browser": True, "es2021": True, "node": True},
}


async def create_tsconfig(config: ProjectConfig, project_path: Path) -> bool:
    ok = await write_json_file(project_path / "tsconfig.json", tsconfig_content(config))
    if ok:
        print_step("Created tsconfig.json")
    return ok


async def create_eslint_config(project_path: Path) -> bool:
    ok = await write_json_file(project_path / ".eslintrc.json", ESLINT_CONFIG)
    if ok:
        print_step("Created .eslintrc.json")
    return ok


async def _render_config(
    renderer: TemplateRenderer,
    name: str,
    project_path: Path,
    context: dict[str, Any],
) -> bool:
    try:
        ok = await renderer.render_to_file(f"config/{name}.j2", project_path / name, context)
    except TemplateError as exc:
        print_error(f"Failed to render {name}: {exc}")
        return False
    if ok:
        print_step(f"Created {name}")
    return ok


async def create_prettier_config(
    renderer: TemplateRenderer, config: ProjectConfig, project_path: Path
) -> bool:
    return await _render_config(
        renderer, "prettier.config.js", project_path, build_context(config)
    )


async def create_vite_config(
    renderer: TemplateRenderer, config: ProjectConfig, project_path: Path
) -> bool:
    """Only React + Vite projects get a ``vite.config.js``."""
    if config.layout is not EntryLayout.REACT_VITE:
        return True
    return await _render_config(renderer, "vite.config.js", project_path, build_context(config))


async def create_postcss_config(
    renderer: TemplateRenderer, config: ProjectConfig, project_path: Path
) -> bool:
    """Only Tailwind projects get a ``postcss.config.js``."""
    if not config.uses_tailwind:
        return True
    return await _render_config(
        renderer, "postcss.config.js", project_path, build_context(config)
    )


async def create_config_files(
    config: ProjectConfig,
    project_path: str | Path,
    renderer: TemplateRenderer | None = None,
) -> bool:
    """Write every configuration file that applies to *config*.

    Returns ``True`` only if every generator succeeded.
    """
    renderer = renderer or TemplateRenderer()
    root = Path(project_path)

    console.print("[blue]Creating configuration files...[/blue]")
    # Generators report failure as False, so every write has settled once
    # gather returns.
    results = await asyncio.gather(
        create_tsconfig(config, root),
        create_eslint_config(root),
        create_prettier_config(renderer, config, root),
        create_vite_config(renderer, config, root),
        create_postcss_config(renderer, config, root),
    )

    if all(results):
        print_step("All configuration files created successfully")
        return True

    print_warning("Some configuration files failed to create")
    return False
