"""
Base URI Resolution.

Determines the externally visible URI prefix of the publishing root. A
configured base URI wins; otherwise it is derived once from the active inbound
request (scheme, host and port, path dropped) plus the web path of the
publishing root, and cached for the lifetime of the resolver.
"""

import logging
from typing import Optional, Protocol
from urllib.parse import urlsplit

from ..core.paths import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


class ActiveRequestProtocol(Protocol):
    """Accessor for the URI of the request currently being handled."""

    def get_request_uri(self) -> Optional[str]:
        """Absolute URI of the active request, or None outside a request."""
        ...  # pragma: no cover


class StaticRequestAccessor:
    """ActiveRequestProtocol returning a fixed URI (or None, e.g. on the CLI)."""

    def __init__(self, uri: Optional[str] = None) -> None:
        self.uri = uri

    def get_request_uri(self) -> Optional[str]:
        return self.uri


def site_root_uri(request_uri: str) -> str:
    """
    Reduces a request URI to ``scheme://host[:port]/``.

    User info, path, query and fragment are dropped.

    Raises:
        ValueError: If the URI has no scheme or host
    """
    parts = urlsplit(request_uri)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"Cannot detect base URI from non-absolute request URI {request_uri!r}")
    host = parts.netloc.rpartition("@")[2]
    return f"{parts.scheme}://{host}/"


class BaseUriResolver:
    """
    Memoizing resolver for the published resources base URI.

    Attributes:
        configured_base_uri: Base URI from configuration, used verbatim
        web_path: Path of the publishing root below the site root (e.g. '_Resources/')
        request_accessor: Source of the active request URI
    """

    def __init__(
        self,
        web_path: str,
        configured_base_uri: Optional[str] = None,
        request_accessor: Optional[ActiveRequestProtocol] = None,
    ) -> None:
        self.web_path = web_path.strip("/") + "/"
        self.configured_base_uri = configured_base_uri
        self.request_accessor = (
            request_accessor if request_accessor is not None else StaticRequestAccessor()
        )
        self._resolved: Optional[str] = None

    def resolve(self) -> str:
        """Returns the base URI, detecting it on the first call only."""
        if self._resolved is None:
            self._resolved = self.configured_base_uri or self.detect()
        return self._resolved

    def detect(self) -> str:
        """
        Derives the base URI from the active request.

        Falls back to the root-relative ``/<web path>`` when no request is
        active.
        """
        request_uri = self.request_accessor.get_request_uri()
        if not request_uri:
            logger.warning(
                f"No active request to detect the base URI from, using /{self.web_path}"
            )
            return f"/{self.web_path}"

        base_uri = site_root_uri(request_uri) + self.web_path
        logger.debug(f"Detected resources base URI {base_uri}")
        return base_uri
