"""
Type definitions for AppSync Lambda events.

Provides TypedDict definitions for the resolver events the book handlers
receive, plus helpers for safe argument extraction.
"""

from typing import Any, Dict, List, Optional, TypedDict


class AppSyncIdentity(TypedDict, total=False):
    """AppSync caller identity (empty for API-key requests)."""

    sub: str
    username: str
    claims: Dict[str, Any]
    sourceIp: List[str]
    defaultAuthStrategy: str


class AppSyncInfo(TypedDict, total=False):
    """Field selection information."""

    fieldName: str
    parentTypeName: str
    variables: Dict[str, Any]
    selectionSetList: List[str]


class AppSyncEvent(TypedDict, total=False):
    """Direct Lambda resolver event structure."""

    identity: Optional[AppSyncIdentity]
    arguments: Dict[str, Any]
    source: Optional[Dict[str, Any]]
    info: AppSyncInfo
    request: Dict[str, Any]
    requestContext: Dict[str, Any]
    prev: Optional[Dict[str, Any]]


def get_argument(event: AppSyncEvent, name: str, default: Any = None) -> Any:
    """
    Extract an argument from the event.

    Args:
        event: AppSync event
        name: Argument name
        default: Default value if not present

    Returns:
        Argument value or default
    """
    return (event.get("arguments") or {}).get(name, default)


def get_field_name(event: AppSyncEvent) -> Optional[str]:
    """Return ``Type.field`` for the invoked field, if AppSync sent it."""
    info: Dict[str, Any] = event.get("info") or {}
    field = info.get("fieldName")
    if not field:
        return None
    parent = info.get("parentTypeName")
    return f"{parent}.{field}" if parent else field
