# devport/api/files.py
"""
DevStudio file tree routes.
"""
from typing import List

from fastapi import APIRouter, Depends, Query, status

from devport.api.deps import require_project
from devport.core.exceptions import NotFoundError
from devport.models import File, FileCreate, FileUpdate, Project
from devport.storage import PlaygroundStorage, get_playground_storage


router = APIRouter(tags=["Files"])


@router.get("/api/projects/{project_id}/files", response_model=List[File])
async def list_files(
    project: Project = Depends(require_project),
    storage: PlaygroundStorage = Depends(get_playground_storage),
):
    return await storage.get_files_by_project_id(project.id)


@router.get("/api/projects/{project_id}/files/by-path", response_model=File)
async def get_file_by_path(
    path: str = Query(..., min_length=1),
    project: Project = Depends(require_project),
    storage: PlaygroundStorage = Depends(get_playground_storage),
):
    file = await storage.get_file_by_path(project.id, path)
    if not file:
        raise NotFoundError("File", path)
    return file


@router.post("/api/projects/{project_id}/files", response_model=File, status_code=status.HTTP_201_CREATED)
async def create_file(
    payload: FileCreate,
    project: Project = Depends(require_project),
    storage: PlaygroundStorage = Depends(get_playground_storage),
):
    """Create a file or folder; paths are unique within a project."""
    return await storage.create_file(project.id, payload)


@router.get("/api/files/{file_id}", response_model=File)
async def get_file(
    file_id: int,
    storage: PlaygroundStorage = Depends(get_playground_storage),
):
    file = await storage.get_file(file_id)
    if not file:
        raise NotFoundError("File", file_id)
    return file


@router.patch("/api/files/{file_id}", response_model=File)
async def update_file(
    file_id: int,
    payload: FileUpdate,
    storage: PlaygroundStorage = Depends(get_playground_storage),
):
    file = await storage.update_file(file_id, payload.changes())
    if not file:
        raise NotFoundError("File", file_id)
    return file


@router.delete("/api/files/{file_id}")
async def delete_file(
    file_id: int,
    storage: PlaygroundStorage = Depends(get_playground_storage),
):
    if not await storage.delete_file(file_id):
        raise NotFoundError("File", file_id)
    return {"success": True}
