"""Token info and token image endpoints."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import Response

from btkninfo.api.dependencies import LookupService
from btkninfo.api.responses import failure_response, image_response, info_response, preflight_response
from btkninfo.core.types import LookupStatus

router = APIRouter(tags=["tokens"])


@router.get(
    "/info/{identifier}",
    operation_id="getTokenInfo",
    summary="Token metadata",
    description=(
        "Find a token by address, identifier or symbol across all registered "
        "token lists and the lists they reference."
    ),
    responses={
        200: {"description": "Token record", "content": {"application/json": {}}},
        404: {"description": "No reachable token matches"},
        500: {"description": "Lookup failed"},
    },
)
async def get_token_info(identifier: str, lookup: LookupService) -> Response:
    """Resolve token metadata."""
    result = await lookup.lookup_info(identifier)
    return info_response(result)


@router.get("/info/", include_in_schema=False)
async def get_token_info_without_identifier() -> Response:
    return failure_response(LookupStatus.MISSING_IDENTIFIER)


@router.get(
    "/image/{path:path}",
    operation_id="getTokenImage",
    summary="Token logo",
    description=(
        "Serve the logo of the first matching token that has one. A trailing "
        "image extension (png, jpg, jpeg, gif, svg, webp) is ignored."
    ),
    responses={
        200: {"description": "Image bytes", "content": {"image/*": {}}},
        404: {"description": "No reachable token with a logo matches"},
        500: {"description": "Lookup failed"},
        502: {"description": "Logo found but could not be downloaded"},
    },
)
async def get_token_image(path: str, lookup: LookupService) -> Response:
    """Resolve and proxy a token logo."""
    result = await lookup.lookup_image(path)
    return image_response(result)


@router.options("/info/", include_in_schema=False)
@router.options("/info/{identifier}", include_in_schema=False)
@router.options("/image/{path:path}", include_in_schema=False)
async def token_preflight() -> Response:
    """CORS preflight."""
    return preflight_response()
