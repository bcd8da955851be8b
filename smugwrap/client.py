"""SmugClient: the public facade.

Wires settings, router, signer, dispatcher and upload service together and
exposes one coroutine per legacy 1.3 method name:

    async with SmugClient(consumer_key="...", consumer_secret="...",
                          token_id="...", token_secret="...") as client:
        album = await client.albums_getInfo(AlbumKey="abc123")
        await client.images_upload(File="/tmp/cat.jpg", AlbumID="abc123")
"""

from typing import Any, Iterable, Optional, Union

from smugwrap.adapters.sanitizer import TagStrippingSanitizer
from smugwrap.adapters.transport import HttpxTransport
from smugwrap.core.config import Access, ClientSettings, Permissions, load_settings
from smugwrap.core.exceptions import ConfigurationError, RemoteError
from smugwrap.core.logging import logger, set_log_level
from smugwrap.core.protocols import Sanitizer, Transport
from smugwrap.domains.dispatch import RequestDispatcher
from smugwrap.domains.oauth import (
    Credentials,
    OAuth1Signer,
    OAuth1TokenResponse,
    build_authorize_url,
    parse_token_response,
)
from smugwrap.domains.routing import EndpointRouter, Endpoints, LegacyMethod, parse_legacy_args
from smugwrap.domains.uploads import UploadRequest, UploadService


# Legacy argument name -> UploadRequest field
_UPLOAD_FIELDS = {
    "File": "file",
    "AlbumID": "album_id",
    "FileName": "file_name",
    "ResponseType": "response_type",
    "ImageID": "image_id",
    "Caption": "caption",
    "Keywords": "keywords",
    "Latitude": "latitude",
    "Longitude": "longitude",
    "Altitude": "altitude",
    "Hidden": "hidden",
}

_AUTHORIZE_ARGS = ("Access", "Permissions", "TokenID")


def _legacy_arguments(*args: Any, **kwargs: Any) -> dict[str, Any]:
    try:
        return parse_legacy_args(*args, **kwargs)
    except ValueError as e:
        raise ConfigurationError(str(e)) from e


def _named_arguments(
    operation: str, accepted: Iterable[str], *args: Any, **kwargs: Any
) -> dict[str, Any]:
    """Parse legacy-style arguments, rejecting names ``operation`` does not take."""
    arguments = _legacy_arguments(*args, **kwargs)
    unknown = sorted(set(arguments) - set(accepted))
    if unknown:
        raise ConfigurationError(f"Unknown argument(s) for {operation}: {', '.join(unknown)}")
    return arguments


def _legacy_operation(method: LegacyMethod):
    route = method.route

    async def operation(self: "SmugClient", *args: Any, **kwargs: Any) -> Any:
        return await self.call(method, *args, **kwargs)

    operation.__name__ = method.value
    operation.__qualname__ = f"SmugClient.{method.value}"
    operation.__doc__ = (
        f"Legacy ``{method.value}``: {route.verb} {route.template}.\n\n"
        f"Required arguments: {', '.join(route.required)}."
    )
    return operation


class SmugClient:
    """Async client for the SmugMug REST API speaking legacy method names.

    Every call resolves its arguments, signs the request with OAuth 1.0a and
    follows redirects (re-signing each hop). Instances are safe to share
    between tasks; credentials are read-only after construction.
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        *,
        transport: Optional[Transport] = None,
        sanitizer: Optional[Sanitizer] = None,
        **options: Any,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Base settings. Defaults to settings loaded from the
                environment.
            transport: Transport to send requests with. Defaults to an owned
                HttpxTransport.
            sanitizer: Sanitizer for path and OAuth arguments.
            **options: Setting overrides (``consumer_key``, ``token_id``, ...).

        Raises:
            ConfigurationError: On unknown options or invalid values.
        """
        unknown = sorted(set(options) - set(ClientSettings.model_fields))
        if unknown:
            raise ConfigurationError(f"Unknown client option(s): {', '.join(unknown)}")
        if settings is None:
            settings = load_settings(**options)
        elif options:
            settings = load_settings(**{**settings.model_dump(), **options})

        if settings.log_level:
            set_log_level(settings.log_level)

        self._settings = settings
        self._owns_transport = transport is None
        self._transport: Transport = transport or HttpxTransport(timeout=settings.timeout_seconds)
        self._sanitizer: Sanitizer = sanitizer or TagStrippingSanitizer()
        self._logger = logger.with_context(app=settings.app_name or "smugwrap")

        self._credentials = Credentials.from_settings(settings)
        self._endpoints = Endpoints(api_base=settings.api_base, upload_base=settings.upload_base)
        self._router = EndpointRouter(self._endpoints, self._sanitizer)
        self._signer = OAuth1Signer(self._credentials)
        self._dispatcher = RequestDispatcher(
            self._signer,
            self._transport,
            content_type=settings.content_type,
            user_agent=settings.user_agent,
            max_redirects=settings.max_redirects,
            logger=self._logger.with_prefix("dispatch: "),
        )
        self._uploads = UploadService(
            self._dispatcher,
            upload_base=settings.upload_base,
            api_ver=settings.api_ver,
            logger=self._logger.with_prefix("upload: "),
        )

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def endpoints(self) -> Endpoints:
        return self._endpoints

    @property
    def router(self) -> EndpointRouter:
        return self._router

    # ------------------------------------------------------------------
    # Name-driven entry points
    # ------------------------------------------------------------------

    @staticmethod
    def supports(name: Union[LegacyMethod, str]) -> bool:
        """Check whether a legacy method name is supported, without raising."""
        return EndpointRouter.is_supported(name)

    def missing_arguments(self, name: Union[LegacyMethod, str], *args: Any, **kwargs: Any):
        """Names of required arguments a call would be missing, without raising.

        Raises:
            UnsupportedMethodError: If the name is not supported.
        """
        return self._router.missing_arguments(name, _legacy_arguments(*args, **kwargs))

    async def call(self, name: Union[LegacyMethod, str], *args: Any, **kwargs: Any) -> Any:
        """Invoke a legacy method by name.

        Arguments may be keyword arguments, mappings, or ``"Key=value"``
        strings, as the legacy clients accepted.

        Returns:
            Parsed JSON for the configured content type, text otherwise.

        Raises:
            UnsupportedMethodError: If the name is not supported.
            MissingArgumentError: If required arguments are absent.
            UnsafeArgumentError: If an argument is rejected by the sanitizer.
            ConfigurationError: If credentials are incomplete.
            TransportError: If the transport fails.
            RemoteError: If the service reports a failure.
            TooManyRedirectsError: If the redirect bound is exceeded.
        """
        spec = self._router.resolve(name, _legacy_arguments(*args, **kwargs))
        return await self._dispatcher.dispatch(spec)

    # ------------------------------------------------------------------
    # Legacy 1.3 method names
    # ------------------------------------------------------------------

    auth_getRequestToken = _legacy_operation(LegacyMethod.AUTH_GET_REQUEST_TOKEN)
    auth_getAccessToken = _legacy_operation(LegacyMethod.AUTH_GET_ACCESS_TOKEN)
    albums_get = _legacy_operation(LegacyMethod.ALBUMS_GET)
    albums_getInfo = _legacy_operation(LegacyMethod.ALBUMS_GET_INFO)
    images_get = _legacy_operation(LegacyMethod.IMAGES_GET)
    images_getInfo = _legacy_operation(LegacyMethod.IMAGES_GET_INFO)
    images_getURLs = _legacy_operation(LegacyMethod.IMAGES_GET_URLS)
    categories_get = _legacy_operation(LegacyMethod.CATEGORIES_GET)
    subcategories_get = _legacy_operation(LegacyMethod.SUBCATEGORIES_GET)
    subcategories_delete = _legacy_operation(LegacyMethod.SUBCATEGORIES_DELETE)
    categories_delete = _legacy_operation(LegacyMethod.CATEGORIES_DELETE)
    images_delete = _legacy_operation(LegacyMethod.IMAGES_DELETE)
    albums_delete = _legacy_operation(LegacyMethod.ALBUMS_DELETE)
    images_changeSettings = _legacy_operation(LegacyMethod.IMAGES_CHANGE_SETTINGS)
    albums_changeSettings = _legacy_operation(LegacyMethod.ALBUMS_CHANGE_SETTINGS)
    categories_rename = _legacy_operation(LegacyMethod.CATEGORIES_RENAME)
    subcategories_rename = _legacy_operation(LegacyMethod.SUBCATEGORIES_RENAME)
    categories_create = _legacy_operation(LegacyMethod.CATEGORIES_CREATE)
    subcategories_create = _legacy_operation(LegacyMethod.SUBCATEGORIES_CREATE)
    albums_create = _legacy_operation(LegacyMethod.ALBUMS_CREATE)
    images_changePositions = _legacy_operation(LegacyMethod.IMAGES_CHANGE_POSITIONS)

    # ------------------------------------------------------------------
    # Uploads
    # ------------------------------------------------------------------

    async def images_upload(self, *args: Any, **kwargs: Any) -> Any:
        """Upload an image file to an album.

        Arguments take the same forms as ``call()``. Recognised names:
        ``File`` and ``AlbumID`` (required), ``FileName``, ``ResponseType``,
        ``ImageID``, ``Caption``, ``Keywords``, ``Latitude``, ``Longitude``,
        ``Altitude`` and ``Hidden``.

        Returns:
            The ``Image`` entry of the response when present, else the
            decoded response.

        Raises:
            ConfigurationError: On unknown or malformed arguments, or if
                credentials are incomplete.
            MissingArgumentError: If ``File`` or ``AlbumID`` is absent.
            UploadFileError: If the file cannot be read.
            TransportError: If the transport fails.
            RemoteError: If the service reports a failure.
            TooManyRedirectsError: If the redirect bound is exceeded.
        """
        arguments = _named_arguments("images_upload", _UPLOAD_FIELDS, *args, **kwargs)
        request = UploadRequest(
            **{_UPLOAD_FIELDS[name]: value for name, value in arguments.items()}
        )
        return await self._uploads.upload(request)

    # ------------------------------------------------------------------
    # OAuth flow
    # ------------------------------------------------------------------

    def authorize(self, *args: Any, **kwargs: Any) -> str:
        """Build the URL an end user visits to authorize this application.

        Arguments take the same forms as ``call()``:

            client.authorize("Access=Full", "Permissions=Modify")
            client.authorize(TokenID=request_token.oauth_token)

        Args:
            Access: ``Public`` (default) or ``Full``.
            Permissions: ``Read`` (default), ``Add`` or ``Modify``.
            TokenID: Request token; defaults to the configured ``token_id``.

        Raises:
            ConfigurationError: If no token is available, or on unknown or
                malformed arguments.
        """
        arguments = _named_arguments("authorize", _AUTHORIZE_ARGS, *args, **kwargs)
        return build_authorize_url(
            self._endpoints.access_base,
            arguments.get("TokenID") or self._credentials.token_id or "",
            access=arguments.get("Access") or Access.PUBLIC,
            permissions=arguments.get("Permissions") or Permissions.READ,
        )

    async def get_request_token(self, callback: Optional[str] = None) -> OAuth1TokenResponse:
        """Obtain a request token (step 1 of the three-legged flow)."""
        body = await self.auth_getRequestToken(
            oauth_callback=callback or self._settings.oauth_callback
        )
        return self._parse_token_body(body)

    async def get_access_token(self, verifier: str) -> OAuth1TokenResponse:
        """Exchange the user's verifier for an access token (step 3).

        The client must carry the request token pair, e.g. via ``with_token``.
        """
        body = await self.auth_getAccessToken(
            oauth_callback=self._settings.oauth_callback, OauthVerifier=verifier
        )
        return self._parse_token_body(body)

    @staticmethod
    def _parse_token_body(body: Any) -> OAuth1TokenResponse:
        if not isinstance(body, (str, bytes)):
            raise RemoteError("Unexpected token endpoint response", body=str(body))
        return parse_token_response(body)

    def with_token(self, token_id: str, token_secret: str) -> "SmugClient":
        """Return a client using another token pair and sharing this transport.

        The returned client never closes the shared transport.
        """
        settings = self._settings.model_copy(
            update={"token_id": token_id, "token_secret": token_secret}
        )
        return SmugClient(settings, transport=self._transport, sanitizer=self._sanitizer)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            aclose = getattr(self._transport, "aclose", None)
            if aclose is not None:
                await aclose()

    async def __aenter__(self) -> "SmugClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
