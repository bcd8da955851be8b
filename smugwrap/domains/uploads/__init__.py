"""Uploads domain: binary image upload."""

from smugwrap.domains.uploads.service import UploadService
from smugwrap.domains.uploads.types import UploadRequest

__all__ = ["UploadRequest", "UploadService"]
