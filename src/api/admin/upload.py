"""Upload admin routes."""

from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile

from api.dependencies.services import get_upload_service
from api.schemas.common import SuccessResponse
from api.schemas.upload import UploadResponse
from core.rate_limit import WRITE_LIMIT, limiter
from domain.services.upload_service import DEFAULT_FOLDER, UploadService

router = APIRouter(prefix="/upload", tags=["upload"])


@router.post(
    "",
    response_model=UploadResponse,
    summary="Upload an image",
    responses={400: {"description": "Missing file, wrong type or too large"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def upload_file(
    request: Request,
    file: UploadFile | None = File(None),
    folder: str = Form(DEFAULT_FOLDER),
    service: UploadService = Depends(get_upload_service),
) -> UploadResponse:
    """Store an image in the product bucket and return its public URL."""
    # One byte past the limit is enough to reject an oversized file
    data = await file.read(service.max_bytes + 1) if file is not None else None
    stored = await service.upload(
        filename=file.filename if file is not None else None,
        content_type=file.content_type if file is not None else None,
        data=data,
        folder=folder,
    )
    return UploadResponse(url=stored.url, path=stored.path)


@router.delete("", response_model=SuccessResponse, summary="Delete an uploaded image")
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_file(
    request: Request,
    path: str | None = Query(None),
    service: UploadService = Depends(get_upload_service),
) -> SuccessResponse:
    await service.delete(path)
    return SuccessResponse()
