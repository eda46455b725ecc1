"""Registered token list overview endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from btkninfo.api.dependencies import TokenClient
from btkninfo.api.schemas import TokenListsResponse, TokenListSummaryResponse

router = APIRouter(tags=["lists"])


@router.get(
    "/lists",
    response_model=TokenListsResponse,
    operation_id="getTokenLists",
    summary="Registered token lists",
    description="List every registered root token list with its current availability.",
)
async def get_token_lists(client: TokenClient) -> TokenListsResponse:
    """Summarize each root list; unavailable lists are reported, not omitted."""
    summaries = []
    for entry, document in await client.get_token_lists():
        summary = TokenListSummaryResponse(
            url=entry.url,
            name=entry.name,
            homepage=entry.homepage,
            available=document is not None,
        )
        if document is not None:
            summary.list_name = document.name
            summary.logo_uri = document.logo_uri
            summary.token_count = len(document.tokens)
            summary.nested_lists = list(document.references)
        summaries.append(summary)

    return TokenListsResponse(lists=summaries, total=len(summaries))
