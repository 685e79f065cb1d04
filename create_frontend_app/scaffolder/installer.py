"""Stage 2: install npm dependencies with the chosen package manager."""

from __future__ import annotations

from pathlib import Path

from ..models import ProjectConfig
from ..utils import console, print_error, print_step, print_warning, run_command
from .dependencies import fallback_install_command, get_dependencies, install_commands


DEFAULT_INSTALL_TIMEOUT = 300


async def install_dependencies(
    config: ProjectConfig,
    project_path: str | Path,
    timeout: int = DEFAULT_INSTALL_TIMEOUT,
) -> bool:
    """Install runtime then development dependencies into *project_path*.

    The main install falls back once to a plain ``<pm> install``; if that
    also fails the stage fails.  A failed dev install is only a warning
    because the project is still usable without the dev tooling.
    """
    deps = get_dependencies(config)
    install_cmd, dev_install_cmd = install_commands(config.package_manager, deps)

    console.print("[blue]Installing dependencies...[/blue]")
    console.print(
        "[dim]This may take a few minutes depending on your internet connection...[/dim]"
    )

    console.print("[blue]Installing main dependencies...[/blue]")
    if not await run_command(install_cmd, cwd=project_path, timeout=timeout):
        print_warning("Main dependencies installation failed, trying alternative approach...")
        fallback_cmd = fallback_install_command(config.package_manager)
        if not await run_command(fallback_cmd, cwd=project_path, timeout=timeout):
            print_error(
                "Failed to install dependencies. Please run "
                f"{' '.join(fallback_cmd)} manually in the project directory."
            )
            return False

    console.print("[blue]Installing dev dependencies...[/blue]")
    if not await run_command(dev_install_cmd, cwd=project_path, timeout=timeout):
        print_warning("Dev dependencies installation failed, but continuing...")
        console.print(
            f"[dim]You can install them manually later with: "
            f"{' '.join(dev_install_cmd[:3])} <packages>[/dim]"
        )

    print_step("Dependencies installed successfully")
    return True
