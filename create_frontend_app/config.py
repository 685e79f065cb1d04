"""create-frontend-app runtime settings.

Timeouts, cleanup retry policy and the working directory for a run. Settings
are a Pydantic v2 model so they are validated at construction time and can be
overridden from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from .models import ProjectConfig
from .scaffolder.project import project_directory


class Settings(BaseModel):
    """Tuning knobs for the assembly pipeline.

    Instances are created once by the CLI entry point (usually via
    :meth:`from_env`) and passed to :class:`~create_frontend_app.pipeline.Pipeline`.
    """

    command_timeout: int = Field(
        default=120, ge=1, description="Default subprocess timeout in seconds"
    )
    install_timeout: int = Field(
        default=300, ge=1, description="Timeout for package-manager installs in seconds"
    )
    cleanup_attempts: int = Field(
        default=3, ge=1, description="How many times to try removing a failed project"
    )
    cleanup_backoff: float = Field(
        default=1.0,
        ge=0,
        description="Seconds multiplied by the attempt number between cleanup retries",
    )
    cwd: Path = Field(default=Path("."), description="Directory the project is created in")

    def project_path(self, config: ProjectConfig) -> Path:
        """Absolute path of the directory a run of *config* will own."""
        return project_directory(config, self.cwd)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            CFA_COMMAND_TIMEOUT, CFA_INSTALL_TIMEOUT, CFA_CLEANUP_ATTEMPTS,
            CFA_CLEANUP_BACKOFF, CFA_CWD.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CFA_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["CFA_COMMAND_TIMEOUT"])
        if os.environ.get("CFA_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = int(os.environ["CFA_INSTALL_TIMEOUT"])
        if os.environ.get("CFA_CLEANUP_ATTEMPTS"):
            kwargs["cleanup_attempts"] = int(os.environ["CFA_CLEANUP_ATTEMPTS"])
        if os.environ.get("CFA_CLEANUP_BACKOFF"):
            kwargs["cleanup_backoff"] = float(os.environ["CFA_CLEANUP_BACKOFF"])
        if os.environ.get("CFA_CWD"):
            kwargs["cwd"] = Path(os.environ["CFA_CWD"])
        return cls(**kwargs)
