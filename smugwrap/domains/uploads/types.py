"""Value types for the uploads domain."""

import os
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True, slots=True)
class UploadRequest:
    """Arguments of an ``images_upload`` call.

    ``file`` and ``album_id`` are required; they are validated by the upload
    service so the error names the legacy argument (``File``/``AlbumID``).
    """

    file: Optional[Union[str, os.PathLike]] = None
    album_id: Optional[Union[str, int]] = None
    file_name: Optional[str] = None
    response_type: str = "JSON"
    image_id: Optional[Union[str, int]] = None
    caption: Optional[str] = None
    keywords: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    altitude: Optional[float] = None
    hidden: Optional[bool] = None

    @property
    def resolved_name(self) -> str:
        """Name the image is stored under: ``file_name`` or the file's basename."""
        if self.file_name:
            return self.file_name
        return os.path.basename(os.fspath(self.file)) if self.file is not None else ""
