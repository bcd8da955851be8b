"""Endpoint router: legacy method + named arguments -> RequestSpec.

The router is pure. It never touches the network, so argument problems are
always reported before anything is signed or sent.
"""

from typing import Any, Mapping, Optional, Tuple, Union

from smugwrap.core.exceptions import MissingArgumentError, UnsupportedMethodError
from smugwrap.core.protocols import Sanitizer
from smugwrap.domains.oauth.encoding import percent_encode
from smugwrap.domains.routing.methods import LegacyMethod
from smugwrap.domains.routing.types import Endpoints, RequestSpec

# Arguments that feed the OAuth parameters instead of the URL
_OAUTH_ARGS = {"oauth_callback": "oauth_callback", "OauthVerifier": "oauth_verifier"}


def parse_legacy_args(*args: Any, **kwargs: Any) -> dict[str, Any]:
    """Merge legacy-style arguments into one mapping.

    Accepts positional mappings and positional ``"Key=value"`` strings, as the
    1.3 API clients did, plus keyword arguments. Later values win, keyword
    arguments last.

    Raises:
        ValueError: If a positional string has no ``=``.
    """
    merged: dict[str, Any] = {}
    for arg in args:
        if isinstance(arg, Mapping):
            merged.update(arg)
        elif isinstance(arg, str):
            key, sep, value = arg.partition("=")
            if not sep:
                raise ValueError(f"Legacy argument must look like Key=value: {arg!r}")
            merged[key] = value
        else:
            raise ValueError(f"Unsupported legacy argument type: {type(arg).__name__}")
    merged.update(kwargs)
    return merged


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


class EndpointRouter:
    """Resolves legacy method calls against the routing table."""

    def __init__(self, endpoints: Endpoints, sanitizer: Sanitizer) -> None:
        """Initialize the router.

        Args:
            endpoints: Base URLs for template expansion.
            sanitizer: Applied to every path segment and OAuth argument.
        """
        self._endpoints = endpoints
        self._sanitizer = sanitizer

    @property
    def endpoints(self) -> Endpoints:
        """Base URLs used for expansion."""
        return self._endpoints

    @staticmethod
    def is_supported(name: Union[LegacyMethod, str]) -> bool:
        """Check whether a legacy identifier is routable."""
        return isinstance(name, LegacyMethod) or LegacyMethod.lookup(name) is not None

    @staticmethod
    def to_method(name: Union[LegacyMethod, str]) -> LegacyMethod:
        """Coerce a legacy identifier to its enum member.

        Raises:
            UnsupportedMethodError: If the identifier is not in the table.
        """
        if isinstance(name, LegacyMethod):
            return name
        method = LegacyMethod.lookup(name)
        if method is None:
            raise UnsupportedMethodError(name)
        return method

    def missing_arguments(
        self, method: Union[LegacyMethod, str], args: Mapping[str, Any]
    ) -> Tuple[str, ...]:
        """Names of required arguments absent from ``args``, in table order."""
        route = self.to_method(method).route
        return tuple(name for name in route.required if _is_missing(args.get(name)))

    def resolve(self, method: Union[LegacyMethod, str], args: Mapping[str, Any]) -> RequestSpec:
        """Build the RequestSpec for a legacy call.

        Raises:
            UnsupportedMethodError: If the identifier is not in the table.
            MissingArgumentError: If required arguments are absent.
            UnsafeArgumentError: If the sanitizer rejects an argument.
        """
        legacy = self.to_method(method)
        route = legacy.route

        missing = self.missing_arguments(legacy, args)
        if missing:
            raise MissingArgumentError(legacy.value, missing)

        template_vars: dict[str, str] = self._endpoints.as_template_vars()
        oauth_values: dict[str, Optional[str]] = {}
        for name in route.required:
            if name == route.payload_arg:
                continue
            clean = self._sanitizer.sanitize(args[name])
            if name in _OAUTH_ARGS:
                oauth_values[_OAUTH_ARGS[name]] = clean
            else:
                template_vars[name] = percent_encode(clean)

        return RequestSpec(
            method=route.verb,
            url=route.template.format(**template_vars),
            payload=args[route.payload_arg] if route.payload_arg else None,
            requires_token=route.requires_token,
            oauth_callback=oauth_values.get("oauth_callback") if not route.requires_token else None,
            oauth_verifier=oauth_values.get("oauth_verifier"),
            legacy_method=legacy,
        )
