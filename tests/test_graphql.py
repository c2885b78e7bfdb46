"""
Tests for the /graphql endpoint.

Tests cover:
- Declared schema shape (messages / addMessage, id + content)
- messages query on an empty and a populated store
- addMessage mutation and id assignment
- Blank content surfaced as a GraphQL error
- REST and GraphQL share one store
"""

from message_board.graphql_schema import schema


GET_MESSAGES = """
    query {
        messages {
            id
            content
        }
    }
"""

ADD_MESSAGE = """
    mutation ($content: String!) {
        addMessage(content: $content) {
            id
            content
        }
    }
"""


def add_message(client, content):
    """Helper to post a message through the mutation."""
    return client.post("/graphql", json={"query": ADD_MESSAGE, "variables": {"content": content}})


class TestSchema:
    """The printed schema keeps the two-operation contract."""

    def test_schema_shape(self):
        sdl = str(schema)

        assert "type Message" in sdl
        assert "id: ID!" in sdl
        assert "content: String!" in sdl
        assert "messages: [Message!]!" in sdl
        assert "addMessage(content: String!): Message" in sdl


class TestMessagesQuery:
    """Test the messages query."""

    def test_empty_store(self, client):
        response = client.post("/graphql", json={"query": GET_MESSAGES})

        assert response.status_code == 200
        assert response.json() == {"data": {"messages": []}}

    def test_hello_world_scenario(self, client):
        first = add_message(client, "hello").json()
        second = add_message(client, "world").json()

        assert first == {"data": {"addMessage": {"id": "1", "content": "hello"}}}
        assert second == {"data": {"addMessage": {"id": "2", "content": "world"}}}

        response = client.post("/graphql", json={"query": GET_MESSAGES})
        assert response.json()["data"]["messages"] == [
            {"id": "1", "content": "hello"},
            {"id": "2", "content": "world"},
        ]

    def test_field_selection(self, client):
        add_message(client, "only content")

        response = client.post("/graphql", json={"query": "{ messages { content } }"})
        assert response.json() == {"data": {"messages": [{"content": "only content"}]}}


class TestAddMessageMutation:
    """Test the addMessage mutation."""

    def test_blank_content_returns_error(self, client):
        response = add_message(client, "   ")

        body = response.json()
        assert body["data"] == {"addMessage": None}
        assert len(body["errors"]) == 1
        assert body["errors"][0]["extensions"]["code"] == "VALIDATION_ERROR"
        assert body["errors"][0]["path"] == ["addMessage"]

        listed = client.post("/graphql", json={"query": GET_MESSAGES}).json()
        assert listed["data"]["messages"] == []

    def test_missing_content_argument(self, client):
        response = client.post(
            "/graphql",
            json={"query": "mutation { addMessage { id } }"}
        )

        body = response.json()
        assert "errors" in body
        assert body.get("data") is None

    def test_mutation_visible_over_rest(self, client):
        add_message(client, "from graphql")
        client.post("/messages", json={"content": "from rest"})

        data = client.get("/messages").json()["data"]
        assert data == [
            {"id": "1", "content": "from graphql"},
            {"id": "2", "content": "from rest"},
        ]
