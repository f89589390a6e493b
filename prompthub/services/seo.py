"""Origin resolution, locale-prefixed paths and canonical/alternate links.

Everything here is a pure function of its arguments. Origin, locale set
and active locale are passed in by the caller rather than looked up
from request or process state.
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

DEFAULT_DEV_HOST = "localhost:3000"
DEFAULT_PROTOCOL = "https"
X_DEFAULT = "x-default"

_ABSOLUTE_URL = re.compile(r"^https?://", re.IGNORECASE)


@dataclass
class LinkSet:
    """Canonical URL plus every locale alternate for one logical page."""
    canonical: str
    alternates: dict[str, str] = field(default_factory=dict)


def is_absolute_url(path: str) -> bool:
    """True for ``http://`` and ``https://`` URLs."""
    return bool(_ABSOLUTE_URL.match(path))


def _normalize_origin(url: str | None) -> str | None:
    if not url:
        return None
    return url[:-1] if url.endswith("/") else url


def resolve_base_url(
    explicit_origin: str | None = None,
    headers: Mapping[str, str] | None = None,
) -> str:
    """Resolve the public origin (scheme + host) for this deployment.

    An explicitly configured origin wins. Otherwise the origin is derived
    from proxy headers, then the ``Host`` header, then a local development
    default. Never raises.
    """
    origin = _normalize_origin(explicit_origin)
    if origin:
        return origin

    lowered = {key.lower(): value for key, value in (headers or {}).items()}

    host = _first_value(lowered.get("x-forwarded-host")) or lowered.get("host") or DEFAULT_DEV_HOST
    protocol = _first_value(lowered.get("x-forwarded-proto")) or DEFAULT_PROTOCOL

    return _normalize_origin(f"{protocol}://{host}")


def _first_value(header: str | None) -> str | None:
    # Proxy chains append comma-separated values; the client-facing one is first
    if not header:
        return None
    return header.split(",")[0].strip() or None


def split_path(path: str | None) -> tuple[str, str]:
    """Split a path into ``(pathname, search)`` with exactly one leading slash."""
    if not path or path == "/":
        return "/", ""
    pathname, _, query = path.partition("?")
    pathname = "/" + pathname.lstrip("/")
    return pathname, f"?{query}" if query else ""


def localize(path: str, locale: str, default_locale: str) -> str:
    """Return *path* as served for *locale*.

    The default locale is unprefixed; every other locale gets a ``/{locale}``
    prefix, with ``/`` collapsing to ``/{locale}``. Absolute URLs pass
    through unchanged.
    """
    if is_absolute_url(path) or locale == default_locale:
        return path

    pathname, search = split_path(path)
    suffix = "" if pathname == "/" else pathname
    return f"/{locale}{suffix}{search}"


def delocalize(path: str, locale: str, default_locale: str) -> str:
    """Strip the ``/{locale}`` prefix added by :func:`localize`."""
    if is_absolute_url(path) or locale == default_locale:
        return path

    prefix = f"/{locale}"
    if path == prefix or path.startswith((f"{prefix}/", f"{prefix}?")):
        rest = path[len(prefix):]
        return rest if rest.startswith("/") else f"/{rest}"
    return path


def to_absolute_url(origin: str, path: str | None) -> str | None:
    """Resolve *path* against *origin*; absolute URLs and ``None`` pass through."""
    if path is None:
        return None
    if is_absolute_url(path):
        return path
    pathname, search = split_path(path)
    return f"{origin}{pathname}{search}"


def build_localized_url(origin: str, path: str, locale: str, default_locale: str) -> str:
    """Absolute URL of *path* as served for *locale*."""
    return to_absolute_url(origin, localize(path, locale, default_locale))


def build_links(
    origin: str,
    path: str,
    locales: Iterable[str],
    default_locale: str,
    active_locale: str | None = None,
) -> LinkSet:
    """Build the canonical URL and locale alternates for one page.

    Every configured locale gets an entry, plus ``x-default`` pointing at
    the unprefixed path. Query strings are kept on every URL. The canonical
    URL is the active locale's alternate, falling back to the unprefixed
    URL when that locale is not configured.
    """
    alternates: dict[str, str] = {}
    for locale in locales:
        alternates[locale] = build_localized_url(origin, path, locale, default_locale)

    unprefixed = to_absolute_url(origin, path)
    alternates[X_DEFAULT] = unprefixed

    locale = active_locale if active_locale is not None else default_locale
    canonical = alternates.get(locale, unprefixed)
    return LinkSet(canonical=canonical, alternates=alternates)
