"""Jinja2 template rendering for generated project files.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``create_frontend_app/scaffolder/templates/`` directory and renders them with
a context built from the user's :class:`~create_frontend_app.models.ProjectConfig`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from ..models import EntryLayout, ProjectConfig
from ..utils import write_file


_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateRenderer:
    """Renders ``.j2`` templates for project scaffolding.

    Templates are grouped by concern: ``config/`` for tool configuration,
    one directory per :class:`~create_frontend_app.models.EntryLayout` for
    entry sources, and shared files at the root.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"react-vite/App.tsx.j2"``).
            context: Dictionary of variables available inside the template.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> bool:
        """Render a template and write the result to *output_path*.

        Rendering errors propagate; write failures are reported by
        :func:`~create_frontend_app.utils.write_file` and return ``False``.
        """
        content = self.render(template_path, context)
        return await write_file(output_path, content)


def build_context(config: ProjectConfig) -> dict[str, Any]:
    """Build the template context shared by every generated file."""
    if config.layout is EntryLayout.REACT_WEBPACK:
        dev_command = f"{config.package_manager.value} start"
    else:
        dev_command = f"{config.package_manager.value} run dev"
    return {
        "project_name": config.project_name,
        "tech_stack": config.tech_stack.value,
        "build_tool": config.build_tool.value,
        "ui_library": config.ui_library.value,
        "state_management": config.state_management.value,
        "fetching_library": config.fetching_library.value,
        "package_manager": config.package_manager.value,
        "layout": config.layout.value,
        "uses_tailwind": config.uses_tailwind,
        "dev_command": dev_command,
    }
