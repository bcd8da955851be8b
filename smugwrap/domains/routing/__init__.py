"""Routing domain: legacy method identifiers to REST requests."""

from smugwrap.domains.routing.methods import ROUTES, LegacyMethod
from smugwrap.domains.routing.router import EndpointRouter, parse_legacy_args
from smugwrap.domains.routing.types import Endpoints, Payload, RequestSpec, Route

__all__ = [
    "ROUTES",
    "EndpointRouter",
    "Endpoints",
    "LegacyMethod",
    "Payload",
    "RequestSpec",
    "Route",
    "parse_legacy_args",
]
