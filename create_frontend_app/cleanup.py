"""Rollback of a partially assembled project."""

from __future__ import annotations

import asyncio
from pathlib import Path

from .utils import console, print_error, print_step, print_warning, remove_directory


async def cleanup_failed_project(
    project_path: str | Path | None,
    attempts: int = 3,
    backoff: float = 1.0,
) -> bool:
    """Remove *project_path* after a failed run, retrying with linear backoff.

    Between attempts the delay is ``attempt * backoff`` seconds (1s then 2s
    with the defaults).  Never raises.

    Returns:
        ``True`` if there was nothing to remove or removal succeeded,
        ``False`` if every attempt failed.
    """
    if not project_path:
        return True

    try:
        console.print("[yellow]Cleaning up failed project creation...[/yellow]")

        for attempt in range(1, attempts + 1):
            try:
                if await remove_directory(project_path):
                    print_step("Cleanup completed")
                    return True
                print_warning(f"Cleanup attempt {attempt} failed")
            except Exception as exc:
                print_warning(f"Cleanup attempt {attempt} failed: {exc}")

            if attempt < attempts:
                delay = attempt * backoff
                print_warning(f"Retrying in {delay:g}s...")
                await asyncio.sleep(delay)

        print_error(f"Failed to clean up project directory after {attempts} attempts")
        print_warning(f"You may need to manually delete the directory: {project_path}")
        return False
    except Exception as exc:
        print_error(f"Cleanup failed: {exc}")
        return False
