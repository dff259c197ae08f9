"""
Appwrite document store client.

This module provides the DocumentStoreClient class for interacting with the
Appwrite Databases REST API: listing, creating and deleting documents, plus
a connectivity check used before a seeding run starts.
"""

import json
import logging
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from shared.config import Settings, load_settings
from shared.errors import ConfigurationError, RemoteOperationError

logger = logging.getLogger(__name__)

# Placeholder understood by Appwrite as "generate a new id server-side"
UNIQUE_ID = "unique()"

DEFAULT_PAGE_SIZE = 100


class Document(BaseModel):
    """A stored document. System attributes are prefixed with `$` on the wire."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(alias="$id")
    collection_id: str | None = Field(default=None, alias="$collectionId")
    database_id: str | None = Field(default=None, alias="$databaseId")
    created_at: str | None = Field(default=None, alias="$createdAt")

    @property
    def data(self) -> dict[str, Any]:
        """User attributes of the document (everything not prefixed with `$`)."""
        return {
            key: value
            for key, value in (self.model_extra or {}).items()
            if not key.startswith("$")
        }

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)


class DocumentList(BaseModel):
    """One page of a document listing."""

    total: int
    documents: list[Document]


def _is_transport_failure(error: BaseException) -> bool:
    return isinstance(error, RemoteOperationError) and error.status_code is None


class DocumentStoreClient:
    """
    Client for the Appwrite Databases API.

    One instance keeps a pooled httpx.AsyncClient; use it as an async context
    manager or call close() when done. Every failure is raised as
    RemoteOperationError. Only the pre-flight check retries.
    """

    def __init__(
        self,
        endpoint: str,
        project_id: str,
        api_key: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
        preflight_attempts: int = 3,
        preflight_wait: wait_base | None = None,
    ):
        """
        Initialize the client.

        Args:
            endpoint: Appwrite endpoint including the /v1 suffix
            project_id: Appwrite project id
            api_key: Server API key
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (used by tests)
            preflight_attempts: Attempts for get_database on transport errors
            preflight_wait: tenacity wait strategy between pre-flight attempts
        """
        if not endpoint or not project_id or not api_key:
            raise ConfigurationError(
                "Appwrite endpoint, project id and API key must all be set"
            )

        self.endpoint = endpoint.rstrip("/")
        self.project_id = project_id
        self.preflight_attempts = preflight_attempts
        self.preflight_wait = preflight_wait or wait_exponential(multiplier=1, min=2, max=10)

        self.headers = {
            "X-Appwrite-Project": project_id,
            "X-Appwrite-Key": api_key,
            "Content-Type": "application/json",
        }
        self._client = httpx.AsyncClient(
            base_url=self.endpoint,
            headers=self.headers,
            timeout=timeout,
            transport=transport,
        )

        logger.info(f"DocumentStoreClient initialized: {self.endpoint}, project_id={project_id}")

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs: Any) -> "DocumentStoreClient":
        settings = settings or load_settings()
        return cls(
            settings.APPWRITE_ENDPOINT,
            settings.APPWRITE_PROJECT_ID,
            settings.APPWRITE_API_KEY,
            timeout=settings.APPWRITE_TIMEOUT_SECONDS,
            **kwargs,
        )

    async def __aenter__(self) -> "DocumentStoreClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    @staticmethod
    def unique_id() -> str:
        """Id placeholder that makes the server assign a fresh document id."""
        return UNIQUE_ID

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and translate failures into RemoteOperationError."""
        try:
            response = await self._client.request(method, path, params=params, json=json_body)
        except httpx.HTTPError as e:
            raise RemoteOperationError(f"{method} {path} failed: {e}") from e

        if response.is_error:
            message = response.text
            error_type = None
            try:
                payload = response.json()
                message = payload.get("message", message)
                error_type = payload.get("type")
            except ValueError:
                pass
            raise RemoteOperationError(message, status_code=response.status_code, error_type=error_type)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    async def get_database(self, database_id: str) -> dict[str, Any]:
        """
        Fetch database metadata, proving endpoint, credentials and id are valid.

        Transport failures are retried with backoff; HTTP errors are not.

        Raises:
            ConfigurationError: If the database cannot be reached
        """
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.preflight_attempts),
                wait=self.preflight_wait,
                retry=retry_if_exception(_is_transport_failure),
                reraise=True,
            ):
                with attempt:
                    return await self._request("GET", f"/databases/{database_id}")
        except RemoteOperationError as e:
            raise ConfigurationError(f"Database {database_id!r} is not reachable: {e}") from e
        raise ConfigurationError(f"Database {database_id!r} is not reachable")

    async def list_documents(
        self,
        database_id: str,
        collection_id: str,
        *,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> DocumentList:
        """
        List one page of documents in a collection.

        Args:
            database_id: Database id
            collection_id: Collection id
            limit: Page size
            offset: Number of documents to skip

        Returns:
            DocumentList with the server-side total and the page content
        """
        queries = [
            json.dumps({"method": "limit", "values": [limit]}),
            json.dumps({"method": "offset", "values": [offset]}),
        ]
        payload = await self._request(
            "GET",
            f"/databases/{database_id}/collections/{collection_id}/documents",
            params={"queries[]": queries},
        )
        try:
            return DocumentList.model_validate(payload)
        except ValidationError as e:
            raise RemoteOperationError(f"Unexpected list response: {e}") from e

    async def create_document(
        self,
        database_id: str,
        collection_id: str,
        document_id: str,
        data: dict[str, Any],
    ) -> Document:
        """
        Create a document.

        Args:
            database_id: Database id
            collection_id: Collection id
            document_id: New id, or unique_id() to let the server choose
            data: Document attributes

        Returns:
            The created document as stored by the server
        """
        payload = await self._request(
            "POST",
            f"/databases/{database_id}/collections/{collection_id}/documents",
            json_body={"documentId": document_id, "data": data},
        )
        try:
            return Document.model_validate(payload)
        except ValidationError as e:
            raise RemoteOperationError(f"Unexpected create response: {e}") from e

    async def delete_document(self, database_id: str, collection_id: str, document_id: str) -> None:
        await self._request(
            "DELETE",
            f"/databases/{database_id}/collections/{collection_id}/documents/{document_id}",
        )
