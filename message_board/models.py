"""
Domain model for the message board.

Messages live only in process memory, so the model is a plain frozen
dataclass rather than an ORM table. For API request/response schemas,
see schemas.py; for the GraphQL types, see graphql_schema.py.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Message:
    """
    A single posted message.

    id is assigned by the store ("1", "2", ...) and content is supplied
    by the caller. Neither can change after creation.
    """
    id: str
    content: str
