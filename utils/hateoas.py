from typing import Any, Dict, Optional, Tuple

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.datastructures import URL

from config.settings import settings
from models.greeting import Greeting


# -----------------------------------------------------------------------------
# Routes used for link building
# -----------------------------------------------------------------------------
GREETING_ROUTE = "/greeting"
GREETING_ROUTE_NAME = "greeting"
GREETING_NAME_PARAM = "name"


class HALJSONResponse(JSONResponse):
    media_type = "application/hal+json"


# -----------------------------------------------------------------------------
# Base URL resolution
# -----------------------------------------------------------------------------
def _first(value: Optional[str]) -> Optional[str]:
    """First entry of a comma separated proxy header, or None when blank."""
    if not value:
        return None
    head = value.split(",")[0].strip()
    return head or None


def _port(value: Optional[str]) -> Optional[str]:
    """ASCII decimal port from a proxy header; anything else is ignored."""
    port = _first(value)
    if port and port.isascii() and port.isdigit():
        return port
    return None


def _parse_forwarded(value: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """
    Extract (proto, host) from the first element of an RFC 7239 Forwarded header.
    e.g. `for=192.0.2.60;proto=https;host=example.com`
    """
    element = _first(value)
    if element is None:
        return None, None

    proto = host = None
    for pair in element.split(";"):
        key, sep, val = pair.partition("=")
        if not sep:
            continue
        val = val.strip().strip('"')
        key = key.strip().lower()
        if key == "proto" and val:
            proto = val
        elif key == "host" and val:
            host = val
    return proto, host


def resolve_base_url(request: Request) -> URL:
    """
    Base URL that links should be built on.

    PUBLIC_BASE_URL wins when configured. Otherwise the request's own base URL
    is used, rewritten by Forwarded / X-Forwarded-* headers when those are trusted.
    """
    if settings.PUBLIC_BASE_URL:
        return URL(settings.PUBLIC_BASE_URL)

    base = request.base_url
    if not settings.TRUST_FORWARDED_HEADERS:
        return base

    headers = request.headers
    proto, host = _parse_forwarded(headers.get("forwarded"))
    proto = proto or _first(headers.get("x-forwarded-proto"))
    host = host or _first(headers.get("x-forwarded-host"))
    port = _port(headers.get("x-forwarded-port"))
    prefix = _first(headers.get("x-forwarded-prefix"))

    if proto:
        base = base.replace(scheme=proto.lower())
    if host:
        if port and ":" not in host:
            host = f"{host}:{port}"
        base = base.replace(netloc=host)
    elif port:
        base = base.replace(port=int(port))
    if prefix:
        base = base.replace(path="/" + prefix.strip("/") + base.path)

    return base


def build_url(request: Request, route_name: str, query: Optional[Dict[str, Any]] = None, **path_params: Any) -> str:
    """Absolute URL for a named route, formatted with concrete arguments."""
    url = request.app.url_path_for(route_name, **path_params).make_absolute_url(
        resolve_base_url(request)
    )
    if query:
        url = url.include_query_params(**query)
    return str(url)


# -----------------------------------------------------------------------------
# Greeting HATEOAS
# -----------------------------------------------------------------------------
def build_greeting_links(request: Request, name: str) -> Dict[str, str]:
    return {
        "self": build_url(request, GREETING_ROUTE_NAME, query={GREETING_NAME_PARAM: name}),
    }

def hateoas_greeting(request: Request, greeting: Greeting, name: str) -> Greeting:
    for rel, href in build_greeting_links(request, name).items():
        greeting.add_link(rel, href)

    return greeting
