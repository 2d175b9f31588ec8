"""
Request descriptor model.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import httpx

from .core.config import get_settings

METHODS = ("GET", "POST", "PUT", "DELETE")


@dataclass(frozen=True)
class RequestDescriptor:
    """
    A fully formed request for the external HTTP transport.

    Attributes:
        method: HTTP method, one of GET, POST, PUT or DELETE
        path: Resource path relative to the API root, including any
            field selection and query string
        headers: Read-only mapping of header names to values
        resource: Tag naming the endpoint family ("people", "groups",
            "updates" or "news")
        body: Serialized request body (JSON or XML text), if any

    Example:
        >>> descriptor = groups.show(547033)
        >>> descriptor.method, descriptor.path
        ('GET', 'groups/547033:(id,name,...)')
    """

    method: str
    path: str
    # Compared but not hashed; the read-only proxy has no hash
    headers: Mapping[str, str] = field(default_factory=dict, hash=False)
    resource: str = ""
    body: Optional[str] = None

    def __post_init__(self):
        if self.method not in METHODS:
            raise ValueError(f"Unsupported HTTP method: {self.method}")
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict form, with ``body`` omitted when there is none."""
        data: Dict[str, Any] = {
            "method": self.method,
            "path": self.path,
            "headers": dict(self.headers),
            "resource": self.resource,
        }
        if self.body is not None:
            data["body"] = self.body
        return data

    def to_httpx(self, base_url: Optional[str] = None) -> httpx.Request:
        """Build an unsent ``httpx.Request`` for a transport to execute."""
        root = base_url or get_settings().base_url
        if not root.endswith("/"):
            root += "/"
        return httpx.Request(
            self.method,
            root + self.path.lstrip("/"),
            headers=dict(self.headers),
            content=self.body.encode("utf-8") if self.body is not None else None,
        )
