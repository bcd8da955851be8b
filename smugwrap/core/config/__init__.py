"""Configuration module for smugwrap.

Usage:
    from smugwrap.core.config import load_settings, SignatureMethod

    settings = load_settings(consumer_key="...", consumer_secret="...")
    if settings.signature_method == SignatureMethod.PLAINTEXT:
        ...
"""

from smugwrap.core.config.enums import Access, Permissions, SignatureMethod
from smugwrap.core.config.settings import ClientSettings, load_settings

__all__ = [
    "Access",
    "ClientSettings",
    "Permissions",
    "SignatureMethod",
    "load_settings",
]
