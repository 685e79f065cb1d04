"""Pydantic v2 models describing the project a user asked for.

``ProjectConfig`` is built once from the prompt answers (or the preset) and
is frozen afterwards; every pipeline stage reads from it and none mutates it.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .validators import project_name_error


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class TechStack(str, Enum):
    """Application framework."""
    REACT = "React"
    NEXTJS = "Next.js"


class BuildTool(str, Enum):
    """Bundler, only meaningful for plain React projects."""
    VITE = "Vite"
    WEBPACK = "Webpack"


class UILibrary(str, Enum):
    """Component / styling library."""
    MANTINE = "Mantine"
    TAILWIND_SHADCN = "Tailwind and Shadcn"


class StateManagement(str, Enum):
    ZUSTAND = "Zustand"
    NONE = "None"


class FetchingLibrary(str, Enum):
    REACT_QUERY = "React Query"
    APOLLO = "Apollo Client"
    NONE = "None"


class PackageManager(str, Enum):
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


class EntryLayout(str, Enum):
    """Source layout derived from tech stack and build tool.

    Every generator that emits framework-specific content branches on this
    closed set rather than on raw tech-stack/build-tool pairs.
    """
    NEXT_PAGES = "next-pages"
    REACT_VITE = "react-vite"
    REACT_WEBPACK = "react-webpack"


# ---------------------------------------------------------------------------
# Project configuration
# ---------------------------------------------------------------------------

class ProjectConfig(BaseModel):
    """Immutable record of the user's choices."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Directory and package name")
    tech_stack: TechStack = Field(default=TechStack.REACT)
    build_tool: BuildTool = Field(
        default=BuildTool.VITE, description="Ignored unless tech_stack is React"
    )
    ui_library: UILibrary = Field(default=UILibrary.TAILWIND_SHADCN)
    state_management: StateManagement = Field(default=StateManagement.NONE)
    fetching_library: FetchingLibrary = Field(default=FetchingLibrary.NONE)
    package_manager: PackageManager = Field(default=PackageManager.NPM)

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        error = project_name_error(value)
        if error:
            raise ValueError(error)
        return value

    @property
    def layout(self) -> EntryLayout:
        """The entry-file layout implied by the stack choices."""
        if self.tech_stack is TechStack.NEXTJS:
            return EntryLayout.NEXT_PAGES
        if self.build_tool is BuildTool.VITE:
            return EntryLayout.REACT_VITE
        return EntryLayout.REACT_WEBPACK

    @property
    def uses_tailwind(self) -> bool:
        return self.ui_library is UILibrary.TAILWIND_SHADCN

    def summary(self) -> dict[str, str]:
        """Label/value pairs for the configuration summary table."""
        rows = {
            "Project name": self.project_name,
            "Tech stack": self.tech_stack.value,
        }
        if self.tech_stack is TechStack.REACT:
            rows["Build tool"] = self.build_tool.value
        rows.update(
            {
                "UI library": self.ui_library.value,
                "State management": self.state_management.value,
                "Data fetching": self.fetching_library.value,
                "Package manager": self.package_manager.value,
            }
        )
        return rows


def preset_config(project_name: str, package_manager: str | PackageManager = "npm") -> ProjectConfig:
    """Fixed Next.js + Mantine configuration used by ``--preset``."""
    return ProjectConfig(
        project_name=project_name,
        tech_stack=TechStack.NEXTJS,
        ui_library=UILibrary.MANTINE,
        state_management=StateManagement.NONE,
        fetching_library=FetchingLibrary.NONE,
        package_manager=PackageManager(package_manager),
    )
