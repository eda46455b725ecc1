"""Domain models for token lists and token records."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TokenRecord(BaseModel):
    """A single asset entry of a token list document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., description="Display name")
    symbol: str = Field(..., description="Ticker symbol")
    identifier: str | None = Field(default=None, description="List-local identifier")
    address: str = Field(..., description="Token address")
    decimals: int = Field(..., description="Number of decimals")
    tags: tuple[str, ...] | None = Field(default=None, description="Free-form tags")
    logo_uri: str | None = Field(default=None, alias="logoURI", description="Logo image URL")

    @field_validator("decimals", mode="before")
    @classmethod
    def _require_number(cls, value: object) -> object:
        # bool is an int subclass; reject it along with strings
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("decimals must be a number")
        return value

    def matches(self, normalized_key: str) -> bool:
        """
        Check whether this token is addressed by an already-normalized key.

        Address, identifier and symbol are compared case-insensitively with
        equal priority.
        """
        if self.address.lower() == normalized_key:
            return True
        if self.identifier is not None and self.identifier.lower() == normalized_key:
            return True
        return self.symbol.lower() == normalized_key

    def to_json_dict(self) -> dict:
        """Serialize using the wire field names, omitting unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class TokenListDocument(BaseModel):
    """A token list; `lists` makes documents nodes of a reference graph."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., description="List name")
    logo_uri: str | None = Field(default=None, alias="logoURI", description="List logo URL")
    tokens: tuple[TokenRecord, ...] = Field(..., description="Tokens in declaration order")
    lists: tuple[str, ...] | None = Field(
        default=None, description="URLs of referenced token list documents"
    )

    @property
    def references(self) -> tuple[str, ...]:
        """Referenced document URLs, empty when the list has none."""
        return self.lists or ()


class RegistryEntry(BaseModel):
    """Display metadata for one root token list URL."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Token list document URL")
    name: str = Field(..., description="Display name")
    homepage: str | None = Field(default=None, description="Maintainer homepage")


@dataclass(frozen=True)
class ImageResource:
    """Raw image bytes with their detected content type."""

    data: bytes
    content_type: str
