"""btkninfo - Token metadata and logo resolution across linked token lists."""

__version__ = "0.1.0"

from btkninfo.client import TokenInfoClient, get_token_image, get_token_info  # noqa: E402
from btkninfo.core.models import (  # noqa: E402
    ImageResource,
    RegistryEntry,
    TokenListDocument,
    TokenRecord,
)
from btkninfo.core.types import LookupMode, LookupStatus, TieBreak  # noqa: E402
from btkninfo.resolution.graph import GraphResolver, TraversalConfig  # noqa: E402

__all__ = [
    # Client
    "TokenInfoClient",
    "get_token_image",
    "get_token_info",
    # Types
    "LookupMode",
    "LookupStatus",
    "TieBreak",
    # Models
    "ImageResource",
    "RegistryEntry",
    "TokenListDocument",
    "TokenRecord",
    # Resolution
    "GraphResolver",
    "TraversalConfig",
    # Version
    "__version__",
]
