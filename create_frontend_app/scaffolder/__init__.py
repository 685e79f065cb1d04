"""create-frontend-app scaffolder -- the four project-assembly stages.

Each stage reads the immutable ``ProjectConfig`` and reports success as a
boolean (stage 1 returns the created path instead)::

    from create_frontend_app.scaffolder import (
        create_project,
        install_dependencies,
        create_config_files,
        setup_project_structure,
    )

    project_path = await create_project(config)
    await install_dependencies(config, project_path)
    await create_config_files(config, project_path)
    await setup_project_structure(config, project_path)

Ordering, gating and rollback live in :mod:`create_frontend_app.pipeline`.
"""

from create_frontend_app.scaffolder.config_gen import create_config_files
from create_frontend_app.scaffolder.dependencies import DependencySet, get_dependencies
from create_frontend_app.scaffolder.installer import install_dependencies
from create_frontend_app.scaffolder.project import (
    create_package_json,
    create_project,
    project_directory,
)
from create_frontend_app.scaffolder.structure import setup_project_structure
from create_frontend_app.scaffolder.templates import TemplateRenderer

__all__ = [
    "DependencySet",
    "TemplateRenderer",
    "create_config_files",
    "create_package_json",
    "create_project",
    "get_dependencies",
    "install_dependencies",
    "project_directory",
    "setup_project_structure",
]
