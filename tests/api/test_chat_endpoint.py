"""
Test suite for chat API endpoint.

Tests POST /api/chat with FastAPI TestClient and a mocked ChatService.

System role: Verification of chat HTTP API endpoint
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from backend.api.deps import get_chat_service
from backend.api.routers.chat import router
from backend.core.exceptions import ValidationError
from backend.models.chat import ChatResponse


@pytest.fixture
def app() -> FastAPI:
    """Create FastAPI test application with chat router."""
    app = FastAPI()
    app.include_router(router)
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Provide TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def mock_chat_service(client: TestClient) -> MagicMock:
    """Install a mocked ChatService for the chat route."""
    service = MagicMock()
    service.process_chat = AsyncMock(return_value=ChatResponse(response="Hello from the portfolio."))
    client.app.dependency_overrides[get_chat_service] = lambda: service
    return service


class TestChatEndpoint:
    """Test suite for POST /api/chat."""

    def test_chat_success(self, client: TestClient, mock_chat_service: MagicMock):
        # Act
        response = client.post("/api/chat", json={"message": "who are you"})

        # Assert
        assert response.status_code == 200
        assert response.json() == {"response": "Hello from the portfolio."}
        mock_chat_service.process_chat.assert_awaited_once_with("who are you")

    def test_blank_message_returns_400(self, client: TestClient, mock_chat_service: MagicMock):
        mock_chat_service.process_chat.side_effect = ValidationError("Message is required", field="message")

        response = client.post("/api/chat", json={"message": "   "})

        assert response.status_code == 400
        assert response.json()["detail"] == "Message is required"

    def test_non_string_message_is_request_error(self, client: TestClient, mock_chat_service: MagicMock):
        response = client.post("/api/chat", json={"message": 42})

        assert response.status_code == 422
        mock_chat_service.process_chat.assert_not_called()

    def test_unexpected_error_returns_500(self, client: TestClient, mock_chat_service: MagicMock):
        mock_chat_service.process_chat.side_effect = RuntimeError("boom")

        response = client.post("/api/chat", json={"message": "hello"})

        assert response.status_code == 500
