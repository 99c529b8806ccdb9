"""Pydantic schemas for the Upload API."""

from pydantic import BaseModel


class UploadResponse(BaseModel):
    """Location of a freshly uploaded object."""

    url: str
    path: str
