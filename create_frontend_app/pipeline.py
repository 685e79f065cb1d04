"""create-frontend-app Pipeline Orchestrator.

Implements the 4-stage project assembly pipeline:

Stage 1: CREATE    -- Create the project directory and package.json.
Stage 2: INSTALL   -- Install runtime and dev dependencies.
Stage 3: CONFIGURE -- Write TypeScript, ESLint, Prettier, Vite and PostCSS configs.
Stage 4: SCAFFOLD  -- Initialise git/husky/shadcn and write the source tree.

Stages run strictly in order and each gates the next.  When a stage after
CREATE fails, the project directory is removed with bounded retries.

Usage::

    create-frontend-app
    create-frontend-app --preset my-app --package-manager pnpm
    python -m create_frontend_app
"""

from __future__ import annotations

import asyncio
import sys
import time
import traceback
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.panel import Panel

from .cleanup import cleanup_failed_project
from .config import Settings
from .models import PackageManager, ProjectConfig, preset_config
from .prompts import ask_questions
from .scaffolder import (
    create_config_files,
    create_project,
    install_dependencies,
    setup_project_structure,
)
from .scaffolder.templates import build_context
from .utils import (
    STAGE_NAMES,
    console,
    format_duration,
    print_error,
    print_stage_header,
    print_success,
    print_summary_table,
)

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class PipelineError(Exception):
    """Raised when a pipeline stage reports failure."""

    def __init__(self, stage: int, message: str) -> None:
        self.stage = stage
        super().__init__(f"Stage {stage} ({STAGE_NAMES.get(stage, '?')}): {message}")


# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class Pipeline:
    """Drives the four assembly stages for a single project.

    Attributes:
        config: The user's immutable project choices.
        settings: Timeouts and cleanup policy.
        project_path: Directory created by stage 1, ``None`` until then.
        state: Dictionary that accumulates per-stage results.
    """

    _STAGE_METHODS: dict[int, str] = {
        1: "stage1_create",
        2: "stage2_install",
        3: "stage3_configure",
        4: "stage4_scaffold",
    }

    def __init__(self, config: ProjectConfig, settings: Settings | None = None) -> None:
        self.config = config
        self.settings = settings or Settings()
        self.project_path: Path | None = None
        self.state: dict[str, Any] = {
            "started_at": datetime.now(timezone.utc).isoformat(),
            "project_path": None,
            "stages_completed": [],
            "stages_failed": [],
            "cleanup": None,
            "success": False,
        }

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    async def stage1_create(self) -> None:
        path = await create_project(self.config, cwd=self.settings.cwd)
        if path is None:
            raise PipelineError(1, "Failed to create project directory")
        self.project_path = path
        self.state["project_path"] = str(path)

    async def stage2_install(self) -> None:
        ok = await install_dependencies(
            self.config, self._require_path(2), timeout=self.settings.install_timeout
        )
        if not ok:
            raise PipelineError(2, "Failed to install dependencies")

    async def stage3_configure(self) -> None:
        if not await create_config_files(self.config, self._require_path(3)):
            raise PipelineError(3, "Failed to create configuration files")

    async def stage4_scaffold(self) -> None:
        ok = await setup_project_structure(
            self.config, self._require_path(4), timeout=self.settings.command_timeout
        )
        if not ok:
            raise PipelineError(4, "Failed to setup project structure")

    def _require_path(self, stage: int) -> Path:
        if self.project_path is None or not self.project_path.is_dir():
            raise PipelineError(stage, "Project directory is missing")
        return self.project_path

    # ------------------------------------------------------------------
    # Orchestration
    # ------------------------------------------------------------------

    async def run(self) -> dict[str, Any]:
        """Execute all stages, rolling back on failure.

        Returns:
            The final state dictionary, including a top-level ``success``
            boolean and, after a failure past stage 1, the ``cleanup`` result.
        """
        pipeline_start = time.monotonic()
        failed = False

        for stage_num in sorted(self._STAGE_METHODS):
            stage_name = STAGE_NAMES.get(stage_num, "UNKNOWN")
            print_stage_header(stage_num, stage_name)

            try:
                await getattr(self, self._STAGE_METHODS[stage_num])()
                self.state["stages_completed"].append(stage_num)

            except PipelineError as exc:
                failed = True
                self.state["stages_failed"].append(stage_num)
                self.state["error"] = str(exc)
                print_error(f"Project creation failed: {exc}")
                break

            except Exception as exc:
                failed = True
                self.state["stages_failed"].append(stage_num)
                self.state["error"] = traceback.format_exc()
                print_error(f"Stage {stage_num} ({stage_name}) FAILED: {exc}")
                console.print(self.state["error"], style="dim", markup=False)
                break

        if failed and self.project_path is not None:
            console.print("\n[yellow]Cleaning up...[/yellow]")
            self.state["cleanup"] = await cleanup_failed_project(
                self.project_path,
                attempts=self.settings.cleanup_attempts,
                backoff=self.settings.cleanup_backoff,
            )

        self.state["success"] = not failed
        self.state["total_duration"] = format_duration(time.monotonic() - pipeline_start)
        self.state["finished_at"] = datetime.now(timezone.utc).isoformat()
        return self.state


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def _print_banner() -> None:
    console.print(
        Panel(
            "[bold bright_cyan]Create Frontend App[/bold bright_cyan]\n"
            "Welcome! Let's create your frontend project.",
            border_style="bright_cyan",
        )
    )


def _print_next_steps(config: ProjectConfig) -> None:
    print_success("\nProject created successfully!")
    console.print("[blue]\nNext steps:[/blue]")
    console.print(f"  cd {config.project_name}")
    console.print(f"  {build_context(config)['dev_command']}")
    console.print("[dim]\nHappy coding![/dim]")


def _build_parser():
    import argparse

    parser = argparse.ArgumentParser(
        prog="create-frontend-app",
        description="Scaffold a React or Next.js frontend project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-frontend-app\n"
            "  create-frontend-app --preset my-app\n"
            "  create-frontend-app --preset my-app --package-manager pnpm\n"
        ),
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Project name (required with --preset)",
    )
    parser.add_argument(
        "--preset",
        action="store_true",
        help="Skip the questions and create a Next.js + Mantine project",
    )
    parser.add_argument(
        "--package-manager", "-p",
        choices=[pm.value for pm in PackageManager],
        default=PackageManager.NPM.value,
        help="Package manager for --preset (default: npm)",
    )
    return parser


def _run(argv: list[str] | None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.preset and not args.name:
        console.print("[bold red]Error:[/bold red] --preset requires a project name")
        return 1

    settings = Settings.from_env()
    _print_banner()

    try:
        if args.preset:
            config = preset_config(args.name, args.package_manager)
        else:
            config = ask_questions()
    except ValidationError as exc:
        messages = "; ".join(err["msg"] for err in exc.errors())
        print_error(f"Error: {messages}")
        return 1
    except (KeyboardInterrupt, EOFError):
        print_error("\nAborted.")
        return 1

    rows = {**config.summary(), "Location": str(settings.project_path(config))}
    print_summary_table(rows, title="Project configuration")

    result = asyncio.run(Pipeline(config, settings).run())
    if not result.get("success"):
        return 1

    _print_next_steps(config)
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-frontend-app``."""
    try:
        code = _run(argv)
    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        code = 1
    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
