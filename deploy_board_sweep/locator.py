"""Resolve the configured project and column names to board ids.

Both lookups read a single page of results. The API's default page size is
assumed to hold every project of the repository and every column of the
project; pagination is deliberately not attempted here.
"""

from typing import Optional

from deploy_board_sweep.board_api import ProjectBoardAPI
from deploy_board_sweep.models import Column, Project
from deploy_board_sweep.utils import require_int, require_name


def find_project(api: ProjectBoardAPI, name: str) -> Optional[Project]:
    """Return the first repository project named *name*, or None."""
    require_name(name, 'projectName')
    for data in api.list_projects():
        if isinstance(data, dict) and data.get('name') == name:
            return Project.from_api(data)
    return None


def find_column(api: ProjectBoardAPI, name: str,
                project_id: int) -> Optional[Column]:
    """Return the first column named *name* in the project, or None."""
    require_name(name, 'columnName')
    require_int(project_id, 'projectId')
    for data in api.list_columns(project_id):
        if isinstance(data, dict) and data.get('name') == name:
            return Column.from_api(data)
    return None
