"""Lookup URL validation and normalization."""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

from ..core.exceptions import InvalidInputError

URL_REQUIRED = "URL parameter is required"
INVALID_URL = "Invalid URL format"
SCHEME_NOT_ALLOWED = "Only HTTP/HTTPS URLs are allowed"

_ALLOWED_SCHEMES = frozenset({"http", "https"})
_DEFAULT_PORTS = {"http": 80, "https": 443}

# WHATWG forbidden host code points (control characters checked separately)
_FORBIDDEN_HOST_CHARS = frozenset(" #%/:<>?@[\\]^|")


def _check_host(host: str, candidate: str) -> str:
    """Reject hosts a browser URL parser would refuse; IDNA-encode the rest."""
    if any(ch in _FORBIDDEN_HOST_CHARS or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in host):
        raise InvalidInputError(INVALID_URL, url=candidate)
    if host.isascii():
        return host
    try:
        return host.encode("idna").decode("ascii")
    except UnicodeError as exc:
        raise InvalidInputError(INVALID_URL, url=candidate) from exc


def normalize_url(raw: str | None) -> str:
    """Validate *raw* as an absolute http(s) URL and return its normal form.

    Scheme and host are lower-cased, default ports dropped and an empty
    path becomes ``/``. Non-ASCII hosts are IDNA-encoded. Query and
    fragment are kept as given.

    No address allow-listing happens here: private and loopback hosts are
    accepted.

    Raises:
        InvalidInputError: missing value, unparsable URL, or a scheme other
            than http/https.
    """
    if not raw:
        raise InvalidInputError(URL_REQUIRED)

    candidate = raw.strip()
    try:
        parts = urlsplit(candidate)
        port = parts.port
    except ValueError as exc:
        raise InvalidInputError(INVALID_URL, url=candidate) from exc

    scheme = parts.scheme.lower()
    if not scheme:
        raise InvalidInputError(INVALID_URL, url=candidate)
    if scheme not in _ALLOWED_SCHEMES:
        raise InvalidInputError(SCHEME_NOT_ALLOWED, url=candidate)

    host = parts.hostname
    if not host:
        raise InvalidInputError(INVALID_URL, url=candidate)

    if parts.netloc.rpartition("@")[2].startswith("["):
        host = f"[{host}]"
    else:
        host = _check_host(host, candidate)
    netloc = host
    if port is not None and port != _DEFAULT_PORTS[scheme]:
        netloc = f"{host}:{port}"

    userinfo = parts.netloc.rpartition("@")[0] if "@" in parts.netloc else ""
    if userinfo:
        netloc = f"{userinfo}@{netloc}"

    return urlunsplit((scheme, netloc, parts.path or "/", parts.query, parts.fragment))
