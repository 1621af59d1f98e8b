# devport/api/projects.py
"""
DevStudio project routes.

Creating a project seeds the file set of its template. Runs are mocked.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from devport.api.deps import get_current_user_id, require_project
from devport.core.exceptions import NotFoundError
from devport.models import Project, ProjectCreate, ProjectUpdate, RunRequest, RunResult
from devport.services.runner import run_file
from devport.services.templates import PROJECT_TEMPLATES, seed_project_files
from devport.storage import PlaygroundStorage, get_playground_storage


router = APIRouter(prefix="/api/projects", tags=["Projects"])


@router.get("", response_model=List[Project])
async def list_projects(
    user_id: int = Depends(get_current_user_id),
    storage: PlaygroundStorage = Depends(get_playground_storage),
):
    """List the acting user's projects."""
    return await storage.get_projects_by_user_id(user_id)


@router.post("", response_model=Project, status_code=status.HTTP_201_CREATED)
async def create_project(
    payload: ProjectCreate,
    user_id: int = Depends(get_current_user_id),
    storage: PlaygroundStorage = Depends(get_playground_storage),
):
    """Create a project and seed its template's files."""
    project = await storage.create_project(user_id, payload)
    await seed_project_files(storage, project)
    return project


@router.get("/{project_id}", response_model=Project)
async def get_project(project: Project = Depends(require_project)):
    return project


@router.patch("/{project_id}", response_model=Project)
async def update_project(
    project_id: int,
    payload: ProjectUpdate,
    storage: PlaygroundStorage = Depends(get_playground_storage),
):
    project = await storage.update_project(project_id, payload.changes())
    if not project:
        raise NotFoundError("Project", project_id)
    return project


@router.delete("/{project_id}")
async def delete_project(
    project_id: int,
    storage: PlaygroundStorage = Depends(get_playground_storage),
):
    """Delete a project with its files and chat history."""
    if not await storage.delete_project(project_id):
        raise NotFoundError("Project", project_id)
    return {"success": True}


@router.post("/{project_id}/run", response_model=RunResult)
async def run_project_file(
    payload: RunRequest,
    project: Project = Depends(require_project),
    storage: PlaygroundStorage = Depends(get_playground_storage),
):
    """Pretend to run a file and return canned output."""
    file = await storage.get_file(payload.file_id)
    if not file or file.project_id != project.id:
        raise NotFoundError("File", payload.file_id)
    return run_file(file)


templates_router = APIRouter(prefix="/api/project-templates", tags=["Projects"])


@templates_router.get("")
async def list_project_templates():
    """Template names with a seeded file set; any other name gets a README only."""
    return {"templates": list(PROJECT_TEMPLATES.keys())}
