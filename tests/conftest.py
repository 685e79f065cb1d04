"""Shared pytest fixtures for the create-frontend-app test suite.

Provides reusable fixtures for:
- Sample project configurations for each entry layout
- Temporary working and project directories
- Settings tuned for fast tests (no cleanup backoff)
"""

from __future__ import annotations

from pathlib import Path

import pytest

from create_frontend_app.config import Settings
from create_frontend_app.models import (
    BuildTool,
    FetchingLibrary,
    PackageManager,
    ProjectConfig,
    StateManagement,
    TechStack,
    UILibrary,
)


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def react_vite_config() -> ProjectConfig:
    """React + Vite + Tailwind/Shadcn, the scenario from the README."""
    return ProjectConfig(
        project_name="demo",
        tech_stack=TechStack.REACT,
        build_tool=BuildTool.VITE,
        ui_library=UILibrary.TAILWIND_SHADCN,
        state_management=StateManagement.NONE,
        fetching_library=FetchingLibrary.NONE,
        package_manager=PackageManager.NPM,
    )


@pytest.fixture
def react_webpack_config() -> ProjectConfig:
    return ProjectConfig(
        project_name="Webpack_App",
        tech_stack=TechStack.REACT,
        build_tool=BuildTool.WEBPACK,
        ui_library=UILibrary.MANTINE,
        state_management=StateManagement.ZUSTAND,
        fetching_library=FetchingLibrary.APOLLO,
        package_manager=PackageManager.YARN,
    )


@pytest.fixture
def nextjs_config() -> ProjectConfig:
    """Next.js + Mantine, no Tailwind."""
    return ProjectConfig(
        project_name="next-app",
        tech_stack=TechStack.NEXTJS,
        ui_library=UILibrary.MANTINE,
        state_management=StateManagement.ZUSTAND,
        fetching_library=FetchingLibrary.REACT_QUERY,
        package_manager=PackageManager.PNPM,
    )


@pytest.fixture
def nextjs_tailwind_config() -> ProjectConfig:
    return ProjectConfig(
        project_name="next-tw",
        tech_stack=TechStack.NEXTJS,
        ui_library=UILibrary.TAILWIND_SHADCN,
    )


# ---------------------------------------------------------------------------
# Paths & Settings
# ---------------------------------------------------------------------------

@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """An existing, empty project directory."""
    path = tmp_path / "project"
    path.mkdir()
    return path


@pytest.fixture
def fast_settings(tmp_path: Path) -> Settings:
    """Settings rooted at ``tmp_path`` with no delay between cleanup attempts."""
    return Settings(cwd=tmp_path, cleanup_backoff=0)
