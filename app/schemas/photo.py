from pydantic import BaseModel


class PhotoUploadResponse(BaseModel):
    """Schema for a successful photo upload"""
    message: str
    foto: str
    url: str
