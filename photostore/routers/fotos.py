from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse
import logging
from ..core.models import (
    SavePhotoRequest,
    SaveResponse,
    ListResponse,
    DeleteResponse,
    ErrorResponse,
)
from ..fs.storage import (
    list_photos as list_store,
    save_photo as save_store,
    delete_photo as delete_store,
    photo_path,
    media_type,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["fotos"])

MISSING_IMAGE = "No se recibió imagen"
NOT_FOUND = "Foto no encontrada"
DELETED = "Foto eliminada"

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get(
    "/api/fotos",
    response_model=ListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List photos",
    description=(
        "Returns every stored photo as filename, url and timestamp.\n\n"
        "Sorted by filename, descending, which puts the newest uploads first."
    ),
)
def list_fotos():
    try:
        return ListResponse(fotos=list_store())
    except Exception as e:
        logger.exception("Listing photos failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.post(
    "/api/guardar-foto",
    response_model=SaveResponse,
    responses=ERROR_RESPONSES,
    summary="Save a photo",
    description=(
        "Send `{\"imagen\": \"data:image/png;base64,...\"}`. The data-URI prefix is optional.\n\n"
        "The decoded bytes are stored as-is under a generated `foto_<ms>_<nnnn>.png` name."
    ),
)
def guardar_foto(payload: SavePhotoRequest):
    if not payload.imagen:
        raise HTTPException(status_code=400, detail=MISSING_IMAGE)
    # Decode errors are reported as server errors, same as write errors
    try:
        return SaveResponse(**save_store(payload.imagen))
    except Exception as e:
        logger.exception("Saving photo failed")
        raise HTTPException(status_code=500, detail=str(e))


@router.delete(
    "/api/fotos/{filename}",
    response_model=DeleteResponse,
    responses=ERROR_RESPONSES,
    summary="Delete a photo",
    description="Removes the stored file. Returns 404 if there is no photo by that name.",
)
def delete_foto(filename: str):
    try:
        delete_store(filename)
        return DeleteResponse(message=DELETED)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Deleting photo %s failed", filename)
        raise HTTPException(status_code=500, detail=str(e))


@router.api_route(
    "/fotos/{filename}",
    methods=["GET", "HEAD"],
    summary="Fetch a photo",
    description="Returns the raw bytes of a stored photo.",
    responses={404: {"model": ErrorResponse}},
)
def get_foto(filename: str):
    try:
        path = photo_path(filename)
    except (FileNotFoundError, ValueError):
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(path, media_type=media_type(path))
