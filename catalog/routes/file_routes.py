"""File catalog API routes."""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query

from catalog.exceptions import CatalogException
from catalog.pagination import normalize_page_request
from catalog.schemas.common import StatusResponse
from catalog.schemas.files import (
    FilePageResponse,
    FileResponse,
    UploadFileRequest,
    UploadFileResponse
)
from catalog.service_locator import get_file_service
from catalog.services.file_service import FileService
from catalog.utils import parse_tags

router = APIRouter(prefix="/file", tags=["Files"])


def file_service_dependency() -> FileService:
    service = get_file_service()
    if service is None:
        raise CatalogException("file service is not initialized")
    return service


@router.post("", response_model=UploadFileResponse)
async def upload_file(
    request: UploadFileRequest,
    file_service: FileService = Depends(file_service_dependency)
):
    """
    Register metadata of an uploaded file.

    Parameters:
        - name: File name (required, non-blank)
        - size: File size in bytes (required, non-negative)
        - tags: Optional list of tags

    Returns:
        - ID: Identifier assigned to the file

    Raises:
        - 400: Name or size missing, or size negative
    """
    stored = file_service.upload_file(request.to_record())
    return UploadFileResponse(ID=stored.file_id)


@router.get("", response_model=FilePageResponse)
async def find_files(
    tags: Optional[str] = Query(None, description="Comma-separated tags, all of which must be present"),
    q: Optional[str] = Query(None, description="Fragment the file name must contain"),
    page: Optional[int] = Query(None, description="Zero-based page index"),
    size: Optional[int] = Query(None, description="Page size"),
    file_service: FileService = Depends(file_service_dependency)
):
    """
    Search files by tag intersection and name fragment.

    Returns:
        - total: Number of matching files across all pages
        - page: Files of the requested page
    """
    page_request = normalize_page_request(page, size)
    result = file_service.find_page(parse_tags(tags), page_request, q)
    return FilePageResponse.from_page(result)


@router.get("/{file_id}", response_model=FileResponse)
async def get_file(
    file_id: str,
    file_service: FileService = Depends(file_service_dependency)
):
    """
    Get metadata of a single file.

    Raises:
        - 404: File not found
    """
    return FileResponse.from_record(file_service.get_file(file_id))


@router.delete("/{file_id}", response_model=StatusResponse, response_model_exclude_none=True)
async def delete_file(
    file_id: str,
    file_service: FileService = Depends(file_service_dependency)
):
    """
    Delete a file permanently.

    Raises:
        - 404: File not found
    """
    file_service.delete_file(file_id)
    return StatusResponse(success=True)


@router.post("/{file_id}/tags", response_model=StatusResponse, response_model_exclude_none=True)
async def update_tags(
    file_id: str,
    tags: List[str] = Body(...),
    file_service: FileService = Depends(file_service_dependency)
):
    """
    Replace the tags of a file with the given list.

    Raises:
        - 404: File not found
    """
    file_service.update_tags(file_id, tags)
    return StatusResponse(success=True)


@router.delete("/{file_id}/tags", response_model=StatusResponse, response_model_exclude_none=True)
async def delete_tags(
    file_id: str,
    tags: List[str] = Body(...),
    file_service: FileService = Depends(file_service_dependency)
):
    """
    Remove the given tags from a file.

    Raises:
        - 400: Some tag is not on the file (nothing is removed)
        - 404: File not found
    """
    file_service.delete_tags(file_id, tags)
    return StatusResponse(success=True)
