"""
Remote API access.

APIClient wraps httpx for the transport; the endpoint classes expose
create/update/list/delete per resource type.
"""

from myracli.api.client import APIClient
from myracli.api.endpoints import (
    AbstractEndpoint,
    CacheSettingEndpoint,
    RedirectEndpoint,
)

__all__ = [
    "APIClient",
    "AbstractEndpoint",
    "CacheSettingEndpoint",
    "RedirectEndpoint",
]
