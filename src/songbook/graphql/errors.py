"""
Client-visible GraphQL errors raised by resolvers
"""

from graphql import GraphQLError


class GatewayError(GraphQLError):
    """Base error carrying a machine-readable ``extensions.code``."""

    code = "GATEWAY_ERROR"

    def __init__(self, message: str, **extensions):
        super().__init__(message, extensions={"code": self.code, **extensions})


class NotFoundError(GatewayError):
    """The requested entity does not exist."""

    code = "NOT_FOUND"


class InternalServerError(GatewayError):
    """The document store failed; details are logged, not exposed."""

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str = "Internal server error", **extensions):
        super().__init__(message, **extensions)


class DocumentDecodeError(GatewayError):
    """A stored document does not match its declared shape."""

    code = "DOCUMENT_DECODE_ERROR"
