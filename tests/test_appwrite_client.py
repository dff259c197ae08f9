"""
Tests for the Appwrite document store client.

Requests are answered by httpx.MockTransport, no network involved.
"""

import json

import httpx
import pytest
from tenacity import wait_none

from shared.appwrite_client import UNIQUE_ID, Document, DocumentStoreClient
from shared.config import Settings
from shared.errors import ConfigurationError, RemoteOperationError


def make_client(handler, **kwargs) -> DocumentStoreClient:
    return DocumentStoreClient(
        "https://appwrite.test/v1/",
        "project-1",
        "secret-key",
        transport=httpx.MockTransport(handler),
        preflight_wait=wait_none(),
        **kwargs,
    )


class TestClientConstruction:

    @pytest.mark.parametrize(
        "endpoint,project_id,api_key",
        [("", "p", "k"), ("https://x/v1", "", "k"), ("https://x/v1", "p", "")],
    )
    def test_missing_credentials_raise(self, endpoint, project_id, api_key):
        with pytest.raises(ConfigurationError):
            DocumentStoreClient(endpoint, project_id, api_key)

    async def test_from_settings(self):
        settings = Settings(
            APPWRITE_ENDPOINT="https://appwrite.test/v1",
            APPWRITE_PROJECT_ID="project-1",
            APPWRITE_API_KEY="secret-key",
        )
        client = DocumentStoreClient.from_settings(settings)
        try:
            assert client.endpoint == "https://appwrite.test/v1"
            assert client.headers["X-Appwrite-Project"] == "project-1"
            assert client.headers["X-Appwrite-Key"] == "secret-key"
        finally:
            await client.close()

    def test_unique_id_placeholder(self):
        assert DocumentStoreClient.unique_id() == UNIQUE_ID == "unique()"


class TestDocumentOperations:

    async def test_create_document(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["headers"] = request.headers
            seen["body"] = json.loads(request.content)
            return httpx.Response(
                201,
                json={"$id": "agent-1", "$collectionId": "agents", "$permissions": [], **seen["body"]["data"]},
            )

        async with make_client(handler) as client:
            document = await client.create_document(
                "db", "agents", client.unique_id(), {"name": "Agent 1", "email": "agent1@example.com"}
            )

        assert seen["method"] == "POST"
        assert seen["path"] == "/v1/databases/db/collections/agents/documents"
        assert seen["headers"]["X-Appwrite-Project"] == "project-1"
        assert seen["headers"]["X-Appwrite-Key"] == "secret-key"
        assert seen["body"] == {
            "documentId": "unique()",
            "data": {"name": "Agent 1", "email": "agent1@example.com"},
        }
        assert document.id == "agent-1"
        assert document.collection_id == "agents"
        assert document.data == {"name": "Agent 1", "email": "agent1@example.com"}
        assert document.get("name") == "Agent 1"

    async def test_list_documents_sends_pagination_queries(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["queries"] = request.url.params.get_list("queries[]")
            return httpx.Response(200, json={"total": 3, "documents": [{"$id": "a"}, {"$id": "b"}]})

        async with make_client(handler) as client:
            page = await client.list_documents("db", "reviews", limit=2, offset=4)

        assert [json.loads(q) for q in seen["queries"]] == [
            {"method": "limit", "values": [2]},
            {"method": "offset", "values": [4]},
        ]
        assert page.total == 3
        assert [d.id for d in page.documents] == ["a", "b"]

    async def test_delete_document(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            return httpx.Response(204)

        async with make_client(handler) as client:
            assert await client.delete_document("db", "galleries", "g-9") is None

        assert seen == {"method": "DELETE", "path": "/v1/databases/db/collections/galleries/documents/g-9"}

    async def test_http_error_becomes_remote_operation_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                429,
                json={"message": "Rate limit exceeded", "code": 429, "type": "general_rate_limit_exceeded"},
            )

        async with make_client(handler) as client:
            with pytest.raises(RemoteOperationError) as exc_info:
                await client.create_document("db", "agents", UNIQUE_ID, {"name": "x"})

        assert exc_info.value.status_code == 429
        assert exc_info.value.error_type == "general_rate_limit_exceeded"
        assert "Rate limit exceeded" in str(exc_info.value)

    async def test_transport_error_becomes_remote_operation_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(RemoteOperationError) as exc_info:
                await client.delete_document("db", "agents", "a-1")

        assert exc_info.value.status_code is None

    async def test_malformed_list_response(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"unexpected": True})

        async with make_client(handler) as client:
            with pytest.raises(RemoteOperationError):
                await client.list_documents("db", "agents")


class TestGetDatabase:

    async def test_returns_metadata(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/v1/databases/db"
            return httpx.Response(200, json={"$id": "db", "name": "Listings"})

        async with make_client(handler) as client:
            assert (await client.get_database("db"))["name"] == "Listings"

    async def test_transport_errors_are_retried(self):
        attempts = []

        def handler(request: httpx.Request) -> httpx.Response:
            attempts.append(request)
            if len(attempts) < 3:
                raise httpx.ConnectTimeout("timed out", request=request)
            return httpx.Response(200, json={"$id": "db", "name": "Listings"})

        async with make_client(handler) as client:
            database = await client.get_database("db")

        assert len(attempts) == 3
        assert database["$id"] == "db"

    async def test_unreachable_after_retries_is_configuration_error(self):
        attempts = []

        def handler(request: httpx.Request) -> httpx.Response:
            attempts.append(request)
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(ConfigurationError):
                await client.get_database("db")

        assert len(attempts) == 3

    async def test_http_error_is_not_retried(self):
        attempts = []

        def handler(request: httpx.Request) -> httpx.Response:
            attempts.append(request)
            return httpx.Response(401, json={"message": "Invalid API key"})

        async with make_client(handler) as client:
            with pytest.raises(ConfigurationError, match="Invalid API key"):
                await client.get_database("db")

        assert len(attempts) == 1


def test_document_data_excludes_system_attributes():
    document = Document.model_validate(
        {"$id": "p-1", "$createdAt": "2024-01-01", "$permissions": [], "name": "Property 1", "price": 1200}
    )
    assert document.id == "p-1"
    assert document.created_at == "2024-01-01"
    assert document.data == {"name": "Property 1", "price": 1200}
