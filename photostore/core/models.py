from typing import Optional, List
from pydantic import BaseModel

class SavePhotoRequest(BaseModel):
    imagen: Optional[str] = None

class PhotoRecord(BaseModel):
    filename: str
    url: str
    timestamp: str

class ListResponse(BaseModel):
    success: bool = True
    fotos: List[PhotoRecord]

class SaveResponse(PhotoRecord):
    success: bool = True

class DeleteResponse(BaseModel):
    success: bool = True
    message: str

class ErrorResponse(BaseModel):
    success: bool = False
    error: str
