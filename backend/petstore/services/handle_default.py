"""Default Handlers — the /test enum echo operation."""

from petstore.core.domain_types import ENUM_CODEC
from petstore.schemas.requests import TestEnumQuery


def echo_test_enum(request: TestEnumQuery) -> str:
    """Synchronous handler: echoes the decoded enum back as its wire token."""
    if request.test_query is None:
        return ""
    return ENUM_CODEC.encode(request.test_query)
