"""Mapping of lookup outcomes to cacheable HTTP responses."""

from __future__ import annotations

from urllib.parse import quote

from fastapi.responses import JSONResponse, Response

from btkninfo.core.types import LookupStatus
from btkninfo.services.lookup import LookupResult

# Positive results: 24h fresh, 12h stale-while-revalidate
CACHE_FOUND = "public, max-age=86400, stale-while-revalidate=43200"
CACHE_NOT_FOUND = "public, max-age=300"
CACHE_ERROR = "public, max-age=60"

PREFLIGHT_MAX_AGE = "86400"

# Left unescaped when an identifier has to be percent-encoded
_HEADER_SAFE = "/:@!$&'()*+,;=-._~"

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

# Status code and Cache-Control for every non-success outcome
_FAILURES: dict[LookupStatus, tuple[int, str]] = {
    LookupStatus.NOT_FOUND: (404, CACHE_NOT_FOUND),
    LookupStatus.MISSING_IDENTIFIER: (404, CACHE_ERROR),
    LookupStatus.UPSTREAM_UNAVAILABLE: (502, CACHE_ERROR),
    LookupStatus.ERROR: (500, CACHE_ERROR),
}


def _identifier_header(identifier: str) -> str:
    """Echo the identifier, percent-encoding only values a header cannot carry."""
    try:
        identifier.encode("latin-1")
    except UnicodeEncodeError:
        return quote(identifier, safe=_HEADER_SAFE)
    if not identifier.isprintable() or identifier != identifier.strip():
        return quote(identifier, safe=_HEADER_SAFE)
    return identifier


def _found_headers(identifier: str) -> dict[str, str]:
    return {
        "Cache-Control": CACHE_FOUND,
        "X-Token-Identifier": _identifier_header(identifier),
        **CORS_HEADERS,
    }


def failure_response(status: LookupStatus) -> Response:
    """Empty-bodied response for a non-success outcome."""
    status_code, cache_control = _FAILURES[status]
    return Response(
        status_code=status_code,
        headers={"Cache-Control": cache_control, **CORS_HEADERS},
    )


def info_response(result: LookupResult) -> Response:
    """Response for ``GET /info/{identifier}``."""
    if result.status != LookupStatus.FOUND:
        return failure_response(result.status)
    return JSONResponse(
        content=result.token.to_json_dict(),
        headers=_found_headers(result.identifier),
    )


def image_response(result: LookupResult) -> Response:
    """Response for ``GET /image/{path}``."""
    if result.status != LookupStatus.FOUND:
        return failure_response(result.status)
    return Response(
        content=result.image.data,
        media_type=result.image.content_type,
        headers=_found_headers(result.identifier),
    )


def preflight_response() -> Response:
    """Response for CORS preflight ``OPTIONS`` requests."""
    return Response(
        status_code=200,
        headers={**CORS_HEADERS, "Access-Control-Max-Age": PREFLIGHT_MAX_AGE},
    )
