"""
Fixtures for integration tests.

Provides:
- Test client for the FastAPI app
- Mock bill client with canned results
- Signature service with a fixed clock
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from bill_gateway.core.dependencies import get_signature_service
from bill_gateway.main import create_app
from tests.integration.mocks import MockAlipayBillClient, RecordingSignatureService


@pytest.fixture
def mock_bill_client() -> MockAlipayBillClient:
    """Create a mock bill client."""
    return MockAlipayBillClient()


@pytest.fixture
def signature_service() -> RecordingSignatureService:
    """Create a signature service frozen at a fixed timestamp."""
    return RecordingSignatureService()


@pytest.fixture
def app(
    mock_bill_client: MockAlipayBillClient,
    signature_service: RecordingSignatureService,
) -> FastAPI:
    """Create the app with mocked dependencies."""
    application = create_app(bill_client=mock_bill_client)
    application.dependency_overrides[get_signature_service] = lambda: signature_service
    return application


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with mocked dependencies.

    This client:
    - Mocks the Alipay bill client with canned results
    - Freezes the signature clock
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def unconfigured_client() -> AsyncGenerator[AsyncClient, None]:
    """Client for an app created without credentials or overrides."""
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
