"""Shared utility functions for create-frontend-app.

Provides async command execution, safe file-system operations, and Rich-based
console reporting.  Command and file helpers report success as a ``bool`` and
never raise to the caller: every failure is printed to the console instead.
"""

from __future__ import annotations

import asyncio
import json
import shlex
import shutil
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

from .validators import sanitize_input, validate_path

console = Console()

DEFAULT_TIMEOUT = 120

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CommandStep:
    """One entry in a :func:`run_commands` sequence."""

    cmd: str | list[str]
    timeout: int = DEFAULT_TIMEOUT
    capture: bool = False
    optional: bool = False


def _display(cmd: str | Sequence[str]) -> str:
    return cmd if isinstance(cmd, str) else " ".join(cmd)


def _to_argv(cmd: str | Sequence[str]) -> list[str]:
    """Turn *cmd* into an argument vector.

    Strings are only accepted when they carry no shell metacharacters; they
    are then split with :func:`shlex.split`.  Argument lists are passed to the
    child process verbatim and never go through a shell.

    Raises:
        ValueError: If a string command contains dangerous characters.
    """
    if isinstance(cmd, str):
        if sanitize_input(cmd) != cmd:
            raise ValueError("Command contains potentially dangerous characters")
        argv = shlex.split(cmd)
    else:
        argv = [str(part) for part in cmd]
    if not argv:
        raise ValueError("Empty command")
    return argv


async def run_command(
    cmd: str | Sequence[str],
    cwd: str | Path | None = None,
    timeout: int = DEFAULT_TIMEOUT,
    capture: bool = False,
    env: dict[str, str] | None = None,
) -> bool:
    """Run an external command asynchronously.

    Args:
        cmd: Argument list, or a command string free of shell metacharacters.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
        capture: Pipe stdout/stderr instead of inheriting the parent's
            streams.  Captured stderr is echoed when the command fails.
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        ``True`` if the process exited with status 0.  Non-zero exit, timeout,
        spawn failure and rejected command strings all return ``False``.
    """
    import os

    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    try:
        argv = _to_argv(cmd)
        process = await asyncio.create_subprocess_exec(
            *argv,
            stdout=stdout_pipe,
            stderr=stderr_pipe,
            cwd=str(cwd) if cwd else None,
            env=merged_env,
        )
    except (ValueError, OSError) as exc:
        print_error(f"Failed to execute command: {_display(cmd)}")
        print_error(f"Error: {exc}")
        return False

    try:
        _, stderr_bytes = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        print_error(f"Failed to execute command: {_display(cmd)}")
        print_error(f"Error: command timed out after {timeout}s")
        return False

    if process.returncode != 0:
        print_error(f"Failed to execute command: {_display(cmd)}")
        stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
        detail = stderr_str or f"exit status {process.returncode}"
        print_error(f"Error: {detail}")
        return False

    return True


async def run_commands(
    steps: Iterable[CommandStep],
    cwd: str | Path | None = None,
) -> bool:
    """Run *steps* in order, stopping at the first non-optional failure.

    Optional steps that fail are reported as warnings and skipped.
    """
    for step in steps:
        ok = await run_command(step.cmd, cwd=cwd, timeout=step.timeout, capture=step.capture)
        if ok:
            continue
        if not step.optional:
            return False
        print_warning(f"Optional command failed, continuing: {_display(step.cmd)}")
    return True


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


async def create_directory(path: str | Path) -> bool:
    """Create a directory and any missing parents.  Idempotent."""
    try:
        if not validate_path(str(path)):
            raise ValueError("Invalid directory path")
        await asyncio.to_thread(Path(path).mkdir, parents=True, exist_ok=True)
        return True
    except (ValueError, OSError) as exc:
        print_error(f"Failed to create directory: {path}")
        print_error(f"Error: {exc}")
        return False


async def create_directories(paths: Iterable[str | Path]) -> bool:
    """Create each directory in turn; stop at the first failure."""
    for path in paths:
        if not await create_directory(path):
            return False
    return True


async def write_file(path: str | Path, content: str) -> bool:
    """Write *content* as UTF-8 text, creating parent directories as needed.

    Any existing file at *path* is overwritten.
    """
    try:
        if not validate_path(str(path)):
            raise ValueError("Invalid file path")
        file_path = Path(path)
        if not await create_directory(file_path.parent):
            raise OSError(f"Could not create parent directory {file_path.parent}")
        await asyncio.to_thread(file_path.write_text, content, "utf-8")
        return True
    except (ValueError, OSError) as exc:
        print_error(f"Failed to write file: {path}")
        print_error(f"Error: {exc}")
        return False


async def write_json_file(path: str | Path, data: Any) -> bool:
    """Serialise *data* with 2-space indentation and write it to *path*."""
    try:
        content = json.dumps(data, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        print_error(f"Failed to write JSON file: {path}")
        print_error(f"Error: {exc}")
        return False
    return await write_file(path, content)


async def remove_directory(path: str | Path) -> bool:
    """Recursively remove *path*.  A directory that is already gone counts as removed."""
    try:
        if not validate_path(str(path)):
            raise ValueError("Invalid directory path")
        await asyncio.to_thread(shutil.rmtree, Path(path))
        return True
    except FileNotFoundError:
        return True
    except (ValueError, OSError) as exc:
        print_error(f"Failed to remove directory: {path}")
        print_error(f"Error: {exc}")
        return False


async def directory_exists(path: str | Path) -> bool:
    """Return ``True`` if *path* is an existing directory; ``False`` on any error."""
    try:
        return await asyncio.to_thread(Path(path).is_dir)
    except (OSError, ValueError):
        return False


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)  -> "3.7s"
        format_duration(65.2) -> "1m 5s"
    """
    if seconds < 0:
        return "0.0s"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


STAGE_NAMES: dict[int, str] = {
    1: "CREATE",
    2: "INSTALL",
    3: "CONFIGURE",
    4: "SCAFFOLD",
}

STAGE_COLORS: dict[int, str] = {
    1: "bright_cyan",
    2: "bright_green",
    3: "bright_yellow",
    4: "bright_magenta",
}


def print_stage_header(stage: int, name: str) -> None:
    """Print a full-width rule announcing a pipeline stage."""
    color = STAGE_COLORS.get(stage, "white")
    console.print()
    console.print(
        Rule(
            f"[bold {color}] Stage {stage}: {name.upper()} [/bold {color}]",
            style=color,
        )
    )


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_step(message: str) -> None:
    """Print a completed-step line with a green check mark."""
    console.print(f"[green]✓[/green] {message}")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
