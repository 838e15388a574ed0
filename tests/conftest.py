"""
Pytest configuration and shared fixtures for the serverless CRUD functions.

This module provides common test fixtures and configuration used across
unit and end-to-end tests.
"""

import json
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import pytest

# Powertools reads its settings when the shared logger, tracer and metrics are
# created, which happens while test modules are imported.
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "ENVIRONMENT": "test",
    "APP_VERSION": "test-1.0.0",
    "POWERTOOLS_SERVICE_NAME": "test-crud-service",
    "POWERTOOLS_METRICS_NAMESPACE": "TestCrudService",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    "API_BASE_PATH": "/api",
    "QUEUE_NAME": "orders-queue",
    "DEAD_LETTER_MALFORMED_MESSAGES": "false",
    "TIMER_PAST_DUE_SECONDS": "60",
})

from aws_lambda_powertools.event_handler import APIGatewayHttpResolver  # noqa: E402
from aws_lambda_powertools.event_handler.api_gateway import ApiGatewayResolver  # noqa: E402
from aws_lambda_env_modeler import LAMBDA_ENV_MODELER_DISABLE_CACHE  # noqa: E402

from crud_service.dal.memory_store import InMemoryStore  # noqa: E402
from crud_service.handlers.api_handler import create_app  # noqa: E402


@pytest.fixture(autouse=True)
def reset_env_cache(monkeypatch):
    """Drop cached environment models so tests can change variables."""
    monkeypatch.setenv(LAMBDA_ENV_MODELER_DISABLE_CACHE, "true")
    yield


@pytest.fixture
def lambda_context():
    """Create a Lambda context for testing."""

    @dataclass
    class LambdaContext:
        function_name: str = "test-lambda-function"
        function_version: str = "$LATEST"
        memory_limit_in_mb: int = 512
        invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:test-lambda-function"
        aws_request_id: str = "test-request-id-123"
        log_group_name: str = "/aws/lambda/test-lambda-function"
        log_stream_name: str = "2024/01/01/[$LATEST]test123"

        def get_remaining_time_in_millis(self) -> int:
            return 30000

    return LambdaContext()


@pytest.fixture
def user_store() -> InMemoryStore:
    """A fresh, empty user store."""
    return InMemoryStore()


@pytest.fixture
def app(user_store) -> ApiGatewayResolver:
    """A REST API resolver with every route registered against a fresh store."""
    return create_app(user_store=user_store)


@pytest.fixture
def http_app(user_store) -> ApiGatewayResolver:
    """An HTTP API (v2) resolver sharing the store of ``app``."""
    return create_app(user_store=user_store, resolver_cls=APIGatewayHttpResolver)


@pytest.fixture
def api_gateway_event() -> Callable[..., Dict[str, Any]]:
    """Factory for API Gateway REST proxy events."""

    def make_event(
        method: str,
        path: str,
        body: Any = None,
        query: Optional[Dict[str, str]] = None,
        raw_body: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        if raw_body is None and body is not None:
            raw_body = json.dumps(body)

        return {
            "httpMethod": method,
            "path": path,
            "resource": "/{proxy+}",
            "headers": {
                "Content-Type": "application/json",
                "User-Agent": "test-agent/1.0",
                **(headers or {}),
            },
            "multiValueHeaders": {},
            "body": raw_body,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "httpMethod": method,
                "path": path,
                "protocol": "HTTP/1.1",
                "identity": {
                    "sourceIp": "127.0.0.1",
                    "userAgent": "test-agent/1.0",
                },
            },
            "pathParameters": None,
            "queryStringParameters": query,
            "multiValueQueryStringParameters": None,
            "stageVariables": None,
            "isBase64Encoded": False,
        }

    return make_event


@pytest.fixture
def http_api_event() -> Callable[..., Dict[str, Any]]:
    """Factory for API Gateway HTTP API (payload format 2.0) events."""

    def make_event(method: str, path: str, body: Any = None, query: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        return {
            "version": "2.0",
            "routeKey": "$default",
            "rawPath": path,
            "rawQueryString": "&".join(f"{key}={value}" for key, value in (query or {}).items()),
            "headers": {"content-type": "application/json"},
            "queryStringParameters": query,
            "requestContext": {
                "accountId": "123456789012",
                "apiId": "api-id",
                "requestId": "test-request-id-456",
                "stage": "$default",
                "http": {
                    "method": method,
                    "path": path,
                    "protocol": "HTTP/1.1",
                    "sourceIp": "127.0.0.1",
                    "userAgent": "test-agent/1.0",
                },
            },
            "body": None if body is None else json.dumps(body),
            "isBase64Encoded": False,
        }

    return make_event


def decode_response(response: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten REST multi-value headers into ``headers`` and decode the JSON body."""
    headers = dict(response.get("headers") or {})
    for name, values in (response.get("multiValueHeaders") or {}).items():
        headers[name] = ", ".join(values)
    response["headers"] = headers
    response["json"] = json.loads(response["body"])
    return response


@pytest.fixture
def decode() -> Callable[[Dict[str, Any]], Dict[str, Any]]:
    """Decoder for raw proxy responses, for tests that call handlers directly."""
    return decode_response


@pytest.fixture
def resolve() -> Callable[[ApiGatewayResolver, Dict[str, Any]], Dict[str, Any]]:
    """Resolve an event with a resolver and decode the response."""

    def call(resolver: ApiGatewayResolver, event: Dict[str, Any]) -> Dict[str, Any]:
        return decode_response(resolver.resolve(event, None))

    return call


@pytest.fixture
def call_api(app, api_gateway_event) -> Callable[..., Dict[str, Any]]:
    """Dispatch a REST request through ``app`` and decode the response."""

    def call(method: str, path: str, body: Any = None, **kwargs: Any) -> Dict[str, Any]:
        return decode_response(app.resolve(api_gateway_event(method, path, body, **kwargs), None))

    return call


@pytest.fixture
def sqs_event() -> Callable[[List[Any]], Dict[str, Any]]:
    """Factory for SQS events; dict bodies are JSON encoded."""

    def make_event(bodies: List[Any]) -> Dict[str, Any]:
        records = []
        for index, body in enumerate(bodies):
            records.append({
                "messageId": f"message-{index}",
                "receiptHandle": f"receipt-{index}",
                "body": body if isinstance(body, str) else json.dumps(body),
                "attributes": {
                    "ApproximateReceiveCount": "1",
                    "SentTimestamp": "1704110400000",
                    "SenderId": "123456789012",
                    "ApproximateFirstReceiveTimestamp": "1704110400001",
                },
                "messageAttributes": {},
                "md5OfBody": "test",
                "eventSource": "aws:sqs",
                "eventSourceARN": "arn:aws:sqs:us-east-1:123456789012:orders-queue",
                "awsRegion": "us-east-1",
            })
        return {"Records": records}

    return make_event


@pytest.fixture
def scheduled_event() -> Callable[[str], Dict[str, Any]]:
    """Factory for EventBridge scheduled events."""

    def make_event(time: str) -> Dict[str, Any]:
        return {
            "version": "0",
            "id": "53dc4d37-cffa-4f76-80c9-8b7d4a4d2eaa",
            "detail-type": "Scheduled Event",
            "source": "aws.events",
            "account": "123456789012",
            "time": time,
            "region": "us-east-1",
            "resources": ["arn:aws:events:us-east-1:123456789012:rule/scheduled-task"],
            "detail": {},
        }

    return make_event


# Pytest configuration
def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "e2e" in str(item.fspath):
            item.add_marker(pytest.mark.e2e)
