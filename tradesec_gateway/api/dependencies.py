"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from tradesec_gateway.infrastructure.submissions import LoggingSubmissionSink


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_submission_sink(request: Request) -> LoggingSubmissionSink:
    """Provide the submit callback that takes ownership of confirmed submissions"""
    return LoggingSubmissionSink(get_request_id(request))
