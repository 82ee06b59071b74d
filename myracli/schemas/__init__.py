"""
Schemas.

Closed enumerations and typed per-operation option models.
"""

from myracli.schemas.options import (
    CacheSettingCreate,
    CacheSettingUpdate,
    MatchingType,
    Operation,
    RedirectCreate,
    RedirectType,
    RedirectUpdate,
)

__all__ = [
    "CacheSettingCreate",
    "CacheSettingUpdate",
    "MatchingType",
    "Operation",
    "RedirectCreate",
    "RedirectType",
    "RedirectUpdate",
]
