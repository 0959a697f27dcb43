from fastapi import APIRouter, Depends, Query, Request, Response
from starlette.concurrency import run_in_threadpool

from freeeats.api import deps
from freeeats.schemas.storage import StoredFileResponse
from freeeats.services.storage import StorageService

router = APIRouter(prefix="/storage", tags=["Storage"])


async def read_upload_body(request: Request, service: StorageService) -> bytes:
    """Request body, refused as soon as it exceeds the upload size limit."""
    limit = service.max_upload_size
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise service.file_too_large()

    chunks = []
    received = 0
    async for chunk in request.stream():
        received += len(chunk)
        if received > limit:
            raise service.file_too_large()
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("/upload/{file_id}", response_model=StoredFileResponse)
async def upload_file(
    file_id: str,
    request: Request,
    token: str = Query(...),
    service: StorageService = Depends(deps.get_storage_service),
):
    """Receive raw image bytes for a URL issued by an upload-url endpoint."""
    data = await read_upload_body(request, service)
    return await run_in_threadpool(
        service.store_upload, file_id, token, request.headers.get("content-type"), data
    )


@router.get("/{file_id}")
def download_file(file_id: str, service: StorageService = Depends(deps.get_storage_service)):
    data, content_type = service.read(file_id)
    return Response(
        content=data,
        media_type=content_type,
        headers={"Cache-Control": "public, max-age=86400"},
    )
