"""Image upload over the binary upload endpoint.

Uploads do not go through the routing table: the file bytes are the raw body,
metadata travels in ``X-Smug-*`` headers, and only the OAuth protocol
parameters are signed. Signing, redirects and decoding are shared with every
other call through the RequestDispatcher.
"""

import hashlib
import os
from typing import Any, Callable, Optional

import aiofiles
import aiofiles.os

from smugwrap.core.exceptions import MissingArgumentError, UploadFileError
from smugwrap.core.logging import ContextualLogger
from smugwrap.core.logging import logger as default_logger
from smugwrap.domains.dispatch.dispatcher import RequestDispatcher, host_of
from smugwrap.domains.oauth.encoding import percent_encode
from smugwrap.domains.routing.types import RequestSpec
from smugwrap.domains.uploads.types import UploadRequest

UPLOAD_METHOD_NAME = "images_upload"


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _encoded(value: Optional[str]) -> Optional[str]:
    return percent_encode(value) if value is not None else None


class UploadService:
    """Sends images to the upload endpoint."""

    def __init__(
        self,
        dispatcher: RequestDispatcher,
        *,
        upload_base: str,
        api_ver: str,
        logger: Optional[ContextualLogger] = None,
    ) -> None:
        """Initialize the upload service.

        Args:
            dispatcher: Shared dispatcher (signer, transport, redirect loop).
            upload_base: Base URL of the upload host.
            api_ver: Sent as ``X-Smug-Version``.
            logger: Optional contextual logger.
        """
        self._dispatcher = dispatcher
        self._upload_base = upload_base.rstrip("/")
        self._api_ver = api_ver
        self._logger = logger or default_logger.with_prefix("upload: ")

    def upload_url(self, file_name: str) -> str:
        """Target URL for a file name: ``{upload_base}/{encoded name}``."""
        return f"{self._upload_base}/{percent_encode(file_name)}"

    async def read_file(self, path: str) -> bytes:
        """Read the upload file.

        Raises:
            UploadFileError: If the path is not a readable file.
        """
        if not await aiofiles.os.path.isfile(path):
            raise UploadFileError(path, "no such file")
        try:
            async with aiofiles.open(path, "rb") as f:
                return await f.read()
        except OSError as e:
            raise UploadFileError(path, str(e)) from e

    def header_builder(
        self, request: UploadRequest, content: bytes
    ) -> Callable[[str], dict[str, str]]:
        """Build the per-hop header factory for an upload.

        ``Host`` follows the current target so redirected hops stay
        consistent; everything else is fixed for the call.
        Free-text values (file name, caption, keywords) are RFC 3986
        percent-encoded; header values must be ASCII on the wire.
        """
        fixed = {
            "User-Agent": self._dispatcher.user_agent,
            "Content-MD5": hashlib.md5(content).hexdigest(),
            "Connection": "keep-alive",
            "X-Smug-Version": self._api_ver,
            "X-Smug-ResponseType": request.response_type,
            "X-Smug-AlbumID": _render(request.album_id),
            "X-Smug-Filename": percent_encode(request.resolved_name),
        }
        optional = {
            "X-Smug-ImageID": request.image_id,
            "X-Smug-Caption": _encoded(request.caption),
            "X-Smug-Keywords": _encoded(request.keywords),
            "X-Smug-Latitude": request.latitude,
            "X-Smug-Longitude": request.longitude,
            "X-Smug-Altitude": request.altitude,
            "X-Smug-Hidden": request.hidden,
        }
        fixed.update({name: _render(value) for name, value in optional.items() if value is not None})

        def build(url: str) -> dict[str, str]:
            return {"Host": host_of(url), **fixed}

        return build

    async def upload(self, request: UploadRequest) -> Any:
        """Upload one image.

        Returns:
            The ``Image`` entry of the decoded response when present, else the
            decoded response.

        Raises:
            MissingArgumentError: If ``File`` or ``AlbumID`` is absent.
            UploadFileError: If the file cannot be read.
            ConfigurationError: If credentials are incomplete.
            TransportError: If the transport fails.
            RemoteError: On a failure status.
            TooManyRedirectsError: If the redirect bound is exceeded.
        """
        missing = [
            name
            for name, value in (("File", request.file), ("AlbumID", request.album_id))
            if value is None or value == ""
        ]
        if missing:
            raise MissingArgumentError(UPLOAD_METHOD_NAME, missing)

        path = os.fspath(request.file)
        content = await self.read_file(path)
        url = self.upload_url(request.resolved_name)

        self._logger.debug(f"Uploading {len(content)} bytes to album {request.album_id}")
        spec = RequestSpec(method="PUT", url=url, payload=content)
        data = await self._dispatcher.dispatch(
            spec, build_headers=self.header_builder(request, content), sign_body=False
        )

        if isinstance(data, dict) and "Image" in data:
            return data["Image"]
        return data
