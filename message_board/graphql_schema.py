"""
GraphQL schema for the message board.

The schema is declared as code and built when this module is imported,
so a resolver whose signature drifts from the declared types fails at
startup instead of on the first request. Printed, it reads:

    type Message { id: ID!  content: String! }
    type Query { messages: [Message!]! }
    type Mutation { addMessage(content: String!): Message }

messages is non-null at both levels: the store never yields a missing
list or a missing entry, and clients written against the looser
[Message] type accept it unchanged. addMessage stays nullable so a
rejected post comes back as null alongside the error.
"""

import logging
from typing import Optional

import strawberry
from fastapi import Depends
from graphql import GraphQLError
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from message_board.config import settings
from message_board.errors import MessageStoreError
from message_board.logging_utils import log_operation_data
from message_board.metrics import record_message_operation
from message_board.models import Message
from message_board.storage import MessageStore, get_store

logger = logging.getLogger(__name__)


@strawberry.type(name="Message", description="A posted message")
class MessageType:
    id: strawberry.ID
    content: str

    @classmethod
    def from_model(cls, message: Message) -> "MessageType":
        return cls(id=strawberry.ID(message.id), content=message.content)


@strawberry.type
class Query:
    @strawberry.field(description="All messages in the order they were posted")
    def messages(self, info: Info) -> list[MessageType]:
        store: MessageStore = info.context["store"]
        messages = store.list_messages()

        record_message_operation("messages", "listed")
        log_operation_data(info.context["request"], operation="messages", result="listed")
        logger.info(f"GraphQL messages: returned {len(messages)} messages")

        return [MessageType.from_model(m) for m in messages]


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Post a new message")
    def add_message(self, info: Info, content: str) -> Optional[MessageType]:
        store: MessageStore = info.context["store"]
        request = info.context["request"]

        try:
            message = store.append(content)
        except MessageStoreError as e:
            record_message_operation("addMessage", "validation_error")
            log_operation_data(request, operation="addMessage", result="validation_error")
            raise GraphQLError(e.message, extensions={"code": e.error_code}) from e

        record_message_operation("addMessage", "created", stored=store.count())
        log_operation_data(request, operation="addMessage", message_id=message.id, result="created")
        logger.info(f"GraphQL addMessage: created message {message.id}")

        return MessageType.from_model(message)


schema = strawberry.Schema(query=Query, mutation=Mutation)


async def get_context(store: MessageStore = Depends(get_store)) -> dict:
    """Expose the application's store to resolvers."""
    return {"store": store}


def create_graphql_router() -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.GRAPHQL_IDE else None,
    )
