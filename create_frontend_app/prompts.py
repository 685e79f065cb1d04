"""Interactive questions that build a :class:`ProjectConfig`.

The questions are asked in a fixed order; the build-tool question is only
asked for plain React projects.  Prompts are rendered with
:class:`rich.prompt.Prompt` on the shared console.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from rich.prompt import Prompt

from .models import (
    BuildTool,
    FetchingLibrary,
    PackageManager,
    ProjectConfig,
    StateManagement,
    TechStack,
    UILibrary,
)
from .utils import console, print_error
from .validators import project_name_error

E = TypeVar("E", bound=Enum)


def ask_project_name() -> str:
    """Ask until a valid project name is entered."""
    while True:
        answer = Prompt.ask("[blue]What's the project name?[/blue]", console=console).strip()
        error = project_name_error(answer)
        if error is None:
            return answer
        print_error(error)


def ask_choice(question: str, enum_cls: type[E], default: E) -> E:
    """Ask the user to pick one member of *enum_cls* by its display value."""
    answer = Prompt.ask(
        f"[blue]{question}[/blue]",
        choices=[member.value for member in enum_cls],
        default=default.value,
        console=console,
    )
    return enum_cls(answer)


def ask_questions() -> ProjectConfig:
    """Run the full question sequence and return the resulting configuration."""
    project_name = ask_project_name()
    tech_stack = ask_choice("What tech stack to use?", TechStack, TechStack.REACT)

    build_tool = BuildTool.VITE
    if tech_stack is TechStack.REACT:
        build_tool = ask_choice("What build tool to use?", BuildTool, BuildTool.VITE)

    ui_library = ask_choice("What UI library to use?", UILibrary, UILibrary.TAILWIND_SHADCN)
    state_management = ask_choice("State management?", StateManagement, StateManagement.NONE)
    package_manager = ask_choice("Package management?", PackageManager, PackageManager.NPM)
    fetching_library = ask_choice(
        "Data fetching library?", FetchingLibrary, FetchingLibrary.NONE
    )

    return ProjectConfig(
        project_name=project_name,
        tech_stack=tech_stack,
        build_tool=build_tool,
        ui_library=ui_library,
        state_management=state_management,
        fetching_library=fetching_library,
        package_manager=package_manager,
    )
