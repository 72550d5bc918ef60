"""Sample project generation for the ``new`` command."""

from cloudhooks.scaffold.project import ProjectScaffolder, find_project_root

__all__ = ["ProjectScaffolder", "find_project_root"]
