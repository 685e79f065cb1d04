"""Stage 4: initialise tooling and lay down the source tree.

Git, husky and shadcn set-up are best effort: their failures are reported as
warnings.  Directory creation and the required files (entry sources,
``index.html`` for Vite, README, ``.gitignore``) are mandatory and fail the
stage.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import TemplateError

from ..models import EntryLayout, ProjectConfig
from ..utils import (
    DEFAULT_TIMEOUT,
    console,
    create_directories,
    print_error,
    print_step,
    print_warning,
    run_command,
)
from .templates import TemplateRenderer, build_context


SOURCE_DIRECTORIES: tuple[str, ...] = ("src/components", "src/utils", "src/hooks")

# (template, output path relative to the project root) per layout.
ENTRY_FILES: dict[EntryLayout, tuple[tuple[str, str], ...]] = {
    EntryLayout.NEXT_PAGES: (
        ("next-pages/index.js.j2", "src/pages/index.js"),
    ),
    EntryLayout.REACT_VITE: (
        ("react-vite/App.tsx.j2", "src/App.tsx"),
        ("react-vite/index.css.j2", "src/index.css"),
        ("react-vite/main.tsx.j2", "src/main.tsx"),
        ("react-vite/index.html.j2", "index.html"),
    ),
    EntryLayout.REACT_WEBPACK: (
        ("react-webpack/index.js.j2", "src/index.js"),
    ),
}

PROJECT_FILES: tuple[tuple[str, str], ...] = (
    ("README.md.j2", "README.md"),
    ("gitignore.j2", ".gitignore"),
)


async def init_git(project_path: Path, timeout: int = DEFAULT_TIMEOUT) -> bool:
    ok = await run_command(["git", "init"], cwd=project_path, timeout=timeout, capture=True)
    if ok:
        print_step("Initialized git repository")
    else:
        print_warning("git init failed, continuing without a repository")
    return ok


async def setup_husky(
    renderer: TemplateRenderer,
    project_path: Path,
    context: dict[str, Any],
    timeout: int = DEFAULT_TIMEOUT,
) -> bool:
    """Run ``husky init`` and install the pre-commit hook."""
    if not await run_command(["npx", "husky", "init"], cwd=project_path, timeout=timeout):
        print_warning("Husky setup failed, skipping pre-commit hook")
        return False

    hook_path = project_path / ".husky" / "pre-commit"
    try:
        written = await renderer.render_to_file("pre-commit.j2", hook_path, context)
    except TemplateError as exc:
        print_warning(f"Could not render husky pre-commit hook: {exc}")
        return False
    if not written:
        print_warning("Could not write husky pre-commit hook")
        return False
    try:
        hook_path.chmod(0o755)
    except OSError as exc:
        print_warning(f"Could not mark pre-commit hook executable: {exc}")
    print_step("Setup husky pre-commit hook")
    return True


async def setup_shadcn(project_path: Path, timeout: int = DEFAULT_TIMEOUT) -> bool:
    ok = await run_command(
        ["npx", "shadcn-ui@latest", "init", "-y"], cwd=project_path, timeout=timeout
    )
    if ok:
        print_step("Initialized Shadcn/UI")
    else:
        print_warning("Shadcn/UI initialization failed, continuing...")
    return ok


async def _render_files(
    renderer: TemplateRenderer,
    files: tuple[tuple[str, str], ...],
    project_path: Path,
    context: dict[str, Any],
) -> bool:
    for template, relative in files:
        if not await renderer.render_to_file(template, project_path / relative, context):
            return False
        print_step(f"Created {relative}")
    return True


async def setup_project_structure(
    config: ProjectConfig,
    project_path: str | Path,
    timeout: int = DEFAULT_TIMEOUT,
    renderer: TemplateRenderer | None = None,
) -> bool:
    """Initialise tooling and write the source tree for *config*."""
    renderer = renderer or TemplateRenderer()
    root = Path(project_path)
    context = build_context(config)

    console.print("[blue]Setting up project structure...[/blue]")

    await init_git(root, timeout)
    await setup_husky(renderer, root, context, timeout)
    if config.uses_tailwind:
        await setup_shadcn(root, timeout)

    if not await create_directories(root / d for d in SOURCE_DIRECTORIES):
        print_error("Failed to setup project structure: could not create source directories")
        return False

    try:
        if not await _render_files(renderer, ENTRY_FILES[config.layout], root, context):
            print_error("Failed to setup project structure: could not write entry files")
            return False
        if not await _render_files(renderer, PROJECT_FILES, root, context):
            print_error("Failed to setup project structure: could not write project files")
            return False
    except TemplateError as exc:
        print_error(f"Failed to setup project structure: {exc}")
        return False

    print_step("Project structure created successfully")
    return True
