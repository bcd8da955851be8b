"""Closed set of legacy API 1.3 operations and their routes.

New operations are added as new enum members plus a ROUTES entry; callers
never match on raw method-name strings.
"""

from enum import Enum
from typing import Optional

from smugwrap.domains.routing.types import Route


class LegacyMethod(str, Enum):
    """Legacy method identifiers accepted for backward compatibility."""

    AUTH_GET_REQUEST_TOKEN = "auth_getRequestToken"
    AUTH_GET_ACCESS_TOKEN = "auth_getAccessToken"
    ALBUMS_GET = "albums_get"
    ALBUMS_GET_INFO = "albums_getInfo"
    IMAGES_GET = "images_get"
    IMAGES_GET_INFO = "images_getInfo"
    IMAGES_GET_URLS = "images_getURLs"
    CATEGORIES_GET = "categories_get"
    SUBCATEGORIES_GET = "subcategories_get"
    SUBCATEGORIES_DELETE = "subcategories_delete"
    CATEGORIES_DELETE = "categories_delete"
    IMAGES_DELETE = "images_delete"
    ALBUMS_DELETE = "albums_delete"
    IMAGES_CHANGE_SETTINGS = "images_changeSettings"
    ALBUMS_CHANGE_SETTINGS = "albums_changeSettings"
    CATEGORIES_RENAME = "categories_rename"
    SUBCATEGORIES_RENAME = "subcategories_rename"
    CATEGORIES_CREATE = "categories_create"
    SUBCATEGORIES_CREATE = "subcategories_create"
    ALBUMS_CREATE = "albums_create"
    IMAGES_CHANGE_POSITIONS = "images_changePositions"

    @classmethod
    def lookup(cls, name: str) -> Optional["LegacyMethod"]:
        """Return the member for a legacy name, or None if unsupported."""
        try:
            return cls(name)
        except ValueError:
            return None

    @property
    def route(self) -> Route:
        """Routing table entry for this method."""
        return ROUTES[self]


ROUTES: dict[LegacyMethod, Route] = {
    LegacyMethod.AUTH_GET_REQUEST_TOKEN: Route(
        "GET", "{access_base}/getRequestToken", ("oauth_callback",), requires_token=False
    ),
    LegacyMethod.AUTH_GET_ACCESS_TOKEN: Route(
        "GET", "{access_base}/getAccessToken", ("oauth_callback", "OauthVerifier")
    ),
    LegacyMethod.ALBUMS_GET: Route("GET", "{base}/user/{Username}!albums", ("Username",)),
    LegacyMethod.ALBUMS_GET_INFO: Route("GET", "{album_base}/{AlbumKey}", ("AlbumKey",)),
    LegacyMethod.IMAGES_GET: Route("GET", "{album_base}/{AlbumKey}!images", ("AlbumKey",)),
    LegacyMethod.IMAGES_GET_INFO: Route("GET", "{image_base}/{ImageKey}", ("ImageKey",)),
    LegacyMethod.IMAGES_GET_URLS: Route(
        "GET", "{image_base}/{ImageKey}!sizedetails", ("ImageKey",)
    ),
    LegacyMethod.CATEGORIES_GET: Route("GET", "{folder_base}/{Username}!folders", ("Username",)),
    LegacyMethod.SUBCATEGORIES_GET: Route(
        "GET",
        "{folder_base}/{Username}/{ParentCategory}!folders",
        ("Username", "ParentCategory"),
    ),
    LegacyMethod.SUBCATEGORIES_DELETE: Route(
        "DELETE",
        "{folder_base}/{Username}/{ParentCategory}/{ChildCategory}",
        ("Username", "ParentCategory", "ChildCategory"),
    ),
    LegacyMethod.CATEGORIES_DELETE: Route(
        "DELETE", "{folder_base}/{Username}/{Category}", ("Username", "Category")
    ),
    LegacyMethod.IMAGES_DELETE: Route("DELETE", "{image_base}/{ImageKey}", ("ImageKey",)),
    LegacyMethod.ALBUMS_DELETE: Route("DELETE", "{album_base}/{AlbumKey}", ("AlbumKey",)),
    LegacyMethod.IMAGES_CHANGE_SETTINGS: Route(
        "PATCH", "{image_base}/{ImageKey}", ("ImageKey", "ImageData"), "ImageData"
    ),
    LegacyMethod.ALBUMS_CHANGE_SETTINGS: Route(
        "PATCH", "{album_base}/{AlbumKey}", ("AlbumKey", "AlbumData"), "AlbumData"
    ),
    LegacyMethod.CATEGORIES_RENAME: Route(
        "PATCH",
        "{folder_base}/{Username}/{Category}",
        ("Username", "Category", "CategoryData"),
        "CategoryData",
    ),
    LegacyMethod.SUBCATEGORIES_RENAME: Route(
        "PATCH",
        "{folder_base}/{Username}/{ParentCategory}/{ChildCategory}",
        ("Username", "ParentCategory", "ChildCategory", "SubcategoryData"),
        "SubcategoryData",
    ),
    LegacyMethod.CATEGORIES_CREATE: Route(
        "POST", "{folder_base}/{Username}!folders", ("Username", "CategoryData"), "CategoryData"
    ),
    LegacyMethod.SUBCATEGORIES_CREATE: Route(
        "POST",
        "{folder_base}/{Username}/{ParentCategory}!folders",
        ("Username", "ParentCategory", "SubcategoryData"),
        "SubcategoryData",
    ),
    LegacyMethod.ALBUMS_CREATE: Route(
        "POST",
        "{folder_base}/{Username}/{Category}!albums",
        ("Username", "Category", "AlbumData"),
        "AlbumData",
    ),
    LegacyMethod.IMAGES_CHANGE_POSITIONS: Route(
        "POST", "{album_base}/{AlbumKey}!sortimages", ("AlbumKey", "ImageData"), "ImageData"
    ),
}
