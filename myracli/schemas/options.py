"""
Command Option Schemas.

Typed option models, one per mutating operation, and the validators that
build them from raw CLI values. Validators raise ConfigurationError with
a corrective message naming the flag; they never touch the network.

Update validators take the stored record and backfill every option the
caller left out before re-checking enum membership on the merged values.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from myracli.core.exceptions import ConfigurationError


class Operation(str, Enum):
    """CRUD operation selected with --operation."""

    LIST = "list"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class MatchingType(str, Enum):
    """How a path or source pattern is compared against a request path."""

    PREFIX = "prefix"
    EXACT = "exact"
    SUFFIX = "suffix"


class RedirectType(str, Enum):
    """HTTP redirect flavour: temporary (302) or permanent (301)."""

    REDIRECT = "redirect"
    PERMANENT = "permanent"


def legal_values(enum_cls: type[Enum]) -> str:
    """Comma separated list of an enum's values, for help and error text."""
    return ",".join(member.value for member in enum_cls)


class _OptionsBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class CacheSettingCreate(_OptionsBase):
    path: str
    ttl: int = Field(ge=0)
    type: MatchingType


class CacheSettingUpdate(CacheSettingCreate):
    id: int


class RedirectCreate(_OptionsBase):
    source: str
    dest: str
    type: RedirectType
    matchtype: MatchingType


class RedirectUpdate(RedirectCreate):
    id: int


# =============================================================================
# Field checks
# =============================================================================


def _require(value: Any, flag: str, message: str) -> Any:
    if value is None or value == "":
        raise ConfigurationError(message, field=flag)
    return value


def _require_enum(value: Any, enum_cls: type[Enum], flag: str, missing: str) -> Any:
    _require(value, flag, missing)
    try:
        return enum_cls(value)
    except ValueError:
        raise ConfigurationError(
            f"--{flag} has to be one of {legal_values(enum_cls)}", field=flag,
        ) from None


def _require_ttl(value: Any) -> int:
    _require(value, "ttl", "You need to define a time to live via --ttl")
    try:
        ttl = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError("--ttl has to be a number of seconds", field="ttl") from None
    if ttl < 0:
        raise ConfigurationError("--ttl must not be negative", field="ttl")
    return ttl


def require_id(record_id: int | None) -> int:
    """Check that --id was given for update and delete."""
    return _require(record_id, "id", "You need to define the record to change via --id")


# =============================================================================
# Cache settings
# =============================================================================


def validate_cache_setting_create(
    path: str | None,
    ttl: int | None,
    type: str | None,
) -> CacheSettingCreate:
    """Validate options for creating a cache setting."""
    path = _require(path, "path", "You need to define a path to match via --path")
    ttl = _require_ttl(ttl)
    matching_type = _require_enum(
        type, MatchingType, "type", "You need to define Matching type via --type",
    )
    return CacheSettingCreate(path=path, ttl=ttl, type=matching_type)


def validate_cache_setting_update(
    record_id: int | None,
    existing: dict[str, Any],
    path: str | None = None,
    ttl: int | None = None,
    type: str | None = None,
) -> CacheSettingUpdate:
    """Merge update options over the stored cache setting and validate."""
    record_id = require_id(record_id)
    merged = validate_cache_setting_create(
        path if path else existing.get("path"),
        ttl if ttl is not None else existing.get("ttl"),
        type if type else existing.get("type"),
    )
    return CacheSettingUpdate(id=record_id, **merged.model_dump())


# =============================================================================
# Redirects
# =============================================================================


def validate_redirect_create(
    source: str | None,
    dest: str | None,
    type: str | None,
    matchtype: str | None,
) -> RedirectCreate:
    """Validate options for creating a redirect."""
    source = _require(source, "source", "You need to define source path via --source")
    dest = _require(dest, "dest", "You need to define destination path via --dest")
    redirect_type = _require_enum(
        type, RedirectType, "type", "You need to define Redirect type via --type",
    )
    matching_type = _require_enum(
        matchtype, MatchingType, "matchtype", "You need to define Matching type via --matchtype",
    )
    return RedirectCreate(
        source=source, dest=dest, type=redirect_type, matchtype=matching_type,
    )


def validate_redirect_update(
    record_id: int | None,
    existing: dict[str, Any],
    source: str | None = None,
    dest: str | None = None,
    type: str | None = None,
    matchtype: str | None = None,
) -> RedirectUpdate:
    """Merge update options over the stored redirect and validate."""
    record_id = require_id(record_id)
    merged = validate_redirect_create(
        source or existing.get("source"),
        dest or existing.get("destination"),
        type or existing.get("type"),
        matchtype or existing.get("matchingType"),
    )
    return RedirectUpdate(id=record_id, **merged.model_dump())
