"""Helpers for the 3-legged OAuth1 flow.

1. Obtain a request token (auth_getRequestToken)
2. Redirect the user to the authorize URL built here
3. Exchange the verifier for an access token (auth_getAccessToken)

Token endpoints answer with a form-encoded body which ``parse_token_response``
turns into an OAuth1TokenResponse.
"""

from typing import Union
from urllib.parse import parse_qsl

from smugwrap.core.config import Access, Permissions
from smugwrap.core.exceptions import ConfigurationError, RemoteError
from smugwrap.domains.oauth.encoding import percent_encode
from smugwrap.domains.oauth.types import OAuth1TokenResponse


def build_authorize_url(
    access_base: str,
    token_id: str,
    *,
    access: Union[Access, str] = Access.PUBLIC,
    permissions: Union[Permissions, str] = Permissions.READ,
) -> str:
    """Build the URL an end user visits to grant access (step 2 of the flow).

    Nothing is signed or sent; this is pure string construction.

    Raises:
        ConfigurationError: If no request token is available.
    """
    if not token_id:
        raise ConfigurationError("A request token is required to build the authorize URL")
    access_value = access.value if isinstance(access, Access) else access
    perms_value = permissions.value if isinstance(permissions, Permissions) else permissions
    return (
        f"{access_base}/authorize"
        f"?Access={percent_encode(access_value)}"
        f"&Permissions={percent_encode(perms_value)}"
        f"&oauth_token={percent_encode(token_id)}"
    )


def parse_token_response(body: Union[str, bytes]) -> OAuth1TokenResponse:
    """Parse a form-encoded token endpoint response.

    Raises:
        RemoteError: If the body lacks oauth_token or oauth_token_secret.
    """
    text = body.decode("utf-8") if isinstance(body, bytes) else str(body)
    response_params = dict(parse_qsl(text.strip()))

    if "oauth_token" not in response_params or "oauth_token_secret" not in response_params:
        raise RemoteError("Invalid response from OAuth1 token endpoint", body=text)

    return OAuth1TokenResponse(
        oauth_token=response_params["oauth_token"],
        oauth_token_secret=response_params["oauth_token_secret"],
        **{
            k: v
            for k, v in response_params.items()
            if k not in ["oauth_token", "oauth_token_secret"]
        },
    )
