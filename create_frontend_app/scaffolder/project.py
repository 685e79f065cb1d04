"""Stage 1: create the project directory and its ``package.json``."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..models import EntryLayout, ProjectConfig
from ..utils import (
    create_directory,
    directory_exists,
    print_error,
    print_step,
    remove_directory,
    write_json_file,
)
from ..validators import sanitize_input, validate_project_name


_LAYOUT_SCRIPTS: dict[EntryLayout, dict[str, str]] = {
    EntryLayout.NEXT_PAGES: {
        "dev": "next dev",
        "build": "next build",
        "start": "next start",
        "lint": "next lint",
    },
    EntryLayout.REACT_VITE: {
        "dev": "vite",
        "build": "tsc && vite build",
        "preview": "vite preview",
        "lint": "eslint . --ext ts,tsx --report-unused-disable-directives --max-warnings 0",
    },
    EntryLayout.REACT_WEBPACK: {
        "start": "react-scripts start",
        "build": "react-scripts build",
        "test": "react-scripts test",
        "eject": "react-scripts eject",
        "lint": "eslint . --ext .js,.jsx,.ts,.tsx",
    },
}

_COMMON_SCRIPTS: dict[str, str] = {
    "format": "prettier --write .",
    "format:check": "prettier --check .",
}


def create_package_json(config: ProjectConfig) -> dict[str, Any]:
    """Build the initial ``package.json`` content for *config*."""
    return {
        "name": config.project_name.lower(),
        "private": True,
        "version": "0.0.0",
        "type": "module",
        "scripts": {**_LAYOUT_SCRIPTS[config.layout], **_COMMON_SCRIPTS},
        "dependencies": {},
        "devDependencies": {},
    }


def project_directory(config: ProjectConfig, cwd: str | Path | None = None) -> Path:
    """Absolute directory a run of *config* owns: the sanitized name under *cwd*."""
    base = Path(cwd) if cwd is not None else Path.cwd()
    return base.resolve() / sanitize_input(config.project_name)


async def create_project(config: ProjectConfig, cwd: str | Path | None = None) -> Path | None:
    """Create ``<cwd>/<project_name>`` and write ``package.json`` into it.

    Returns:
        The created project path, or ``None`` if validation or any write
        failed.  The directory never pre-exists, so a failure after it was
        created removes it again before returning.
    """
    if not validate_project_name(config.project_name):
        print_error(f"Failed to create project: invalid project name {config.project_name!r}")
        return None

    project_path = project_directory(config, cwd)
    sanitized_name = project_path.name

    if project_path.exists():
        print_error(f"Failed to create project: directory {sanitized_name} already exists")
        return None

    if not await create_directory(project_path):
        print_error("Failed to create project: could not create project directory")
        return None

    if not await write_json_file(project_path / "package.json", create_package_json(config)):
        print_error("Failed to create project: could not write package.json")
        if await directory_exists(project_path):
            await remove_directory(project_path)
        return None

    print_step(f"Created project directory: {sanitized_name}")
    return project_path
