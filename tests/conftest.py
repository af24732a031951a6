"""Pytest fixtures for testing"""

import pytest
from typing import Any, Dict, List
from fastapi.testclient import TestClient
from tradesec_gateway.api.main import create_app
from tradesec_gateway.api.dependencies import get_submission_sink
from tradesec_gateway.domain.models import Security


class RecordingCallback:
    """Submit/cancel callback that remembers every call"""

    def __init__(self):
        self.calls: List[Any] = []

    def __call__(self, *args: Any) -> None:
        self.calls.append(args[0] if args else None)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def on_submit() -> RecordingCallback:
    return RecordingCallback()


@pytest.fixture
def on_cancel() -> RecordingCallback:
    return RecordingCallback()


@pytest.fixture
def submitted() -> RecordingCallback:
    """Captures what the API hands to its submit callback"""
    return RecordingCallback()


@pytest.fixture
def client(submitted: RecordingCallback) -> TestClient:
    """Create FastAPI test client whose submit callback is recorded"""
    app = create_app()
    app.dependency_overrides[get_submission_sink] = lambda: submitted
    return TestClient(app)


@pytest.fixture
def receivable_fields() -> Dict[str, str]:
    """Valid core fields for a receivable"""
    return {
        "debtor_name": "Acme Corp",
        "amount": "5000",
        "currency": "USD",
        "due_date": "2025-06-01",
        "description": "Invoice #123",
        "category": "Services",
        "risk_level": "Medium",
    }


@pytest.fixture
def security() -> Security:
    return Security(
        id="3f9c2a71-5b1e-4d8a-9c0f-0e6d2b7a4c11",
        title="Acme Corp Q2 Receivables",
        total_value="1000",
        risk_grade="A-",
        duration="90 days",
        expected_return="8.5",
    )


@pytest.fixture
def security_payload(security: Security) -> Dict[str, Any]:
    return {
        "id": security.id,
        "title": security.title,
        "total_value": security.total_value,
        "risk_grade": security.risk_grade,
        "duration": security.duration,
        "expected_return": security.expected_return,
    }
