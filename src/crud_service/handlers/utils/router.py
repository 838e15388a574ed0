"""
HTTP routing on the Powertools event handler.

Route groups register their functions on a ``ResourceRouter`` and
``create_resolver`` includes them in an API Gateway resolver (REST or HTTP
API). The resolver's exception handlers turn every failure into an error
envelope: ``ServiceError`` subclasses keep their status code and message,
pydantic validation errors become 400 responses and anything else becomes a
logged 500. A path that exists but does not route the request method answers
405 with an ``Allow`` header.
"""

import json
from collections import defaultdict
from typing import Any, Callable, Dict, Iterable, List, Optional, Set, Tuple, Type, Union

from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig, Response
from aws_lambda_powertools.event_handler.api_gateway import ApiGatewayResolver, Router
from aws_lambda_powertools.event_handler.exceptions import NotFoundError
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes.common import BaseProxyEvent
from pydantic import ValidationError as PydanticValidationError

from crud_service.handlers.utils.errors import (
    InvalidRequestBodyError,
    MethodNotAllowedError,
    RouteNotFoundError,
    ServiceError,
)
from crud_service.handlers.utils.observability import logger, metrics
from crud_service.handlers.utils.responses import build_error

# Methods answered with 405 on a known path that does not route them
ROUTABLE_METHODS = ('GET', 'POST', 'PUT', 'DELETE', 'PATCH', 'HEAD')


class ResourceRouter(Router):
    """Powertools router that records which methods each rule accepts."""

    def __init__(self) -> None:
        super().__init__()
        self.allowed_methods: Dict[str, Set[str]] = defaultdict(set)

    def route(self, rule: str, method: Union[str, List[str], Tuple[str, ...]], *args: Any, **kwargs: Any):
        methods = [method] if isinstance(method, str) else method
        self.allowed_methods[rule].update(m.upper() for m in methods)
        return super().route(rule, method, *args, **kwargs)


def read_json(event: BaseProxyEvent, error_message: str = 'Invalid request body') -> Any:
    """
    Decode the JSON request body, base64 encoded or not.

    Raises:
        InvalidRequestBodyError: If the body is empty or not valid JSON
    """
    if not event.body:
        logger.error('Request body is empty', extra={'path': event.path, 'http_method': event.http_method})
        raise InvalidRequestBodyError(error_message)

    try:
        return json.loads(event.decoded_body)
    except ValueError as e:
        logger.error('Error parsing request body', extra={
            'error': str(e),
            'path': event.path,
            'http_method': event.http_method,
        })
        raise InvalidRequestBodyError(error_message) from e


def read_json_object(event: BaseProxyEvent, error_message: str = 'Invalid request body') -> Dict[str, Any]:
    """Decode the request body and require it to be a JSON object."""
    body = read_json(event, error_message)
    if not isinstance(body, dict):
        logger.error('Request body is not a JSON object', extra={'path': event.path, 'http_method': event.http_method})
        raise InvalidRequestBodyError(error_message)
    return body


def query_params(event: BaseProxyEvent) -> Dict[str, str]:
    return event.query_string_parameters or {}


def service_error_response(e: ServiceError, path: str) -> Response:
    logger.warning('Request failed', extra={'error': e.to_dict(), 'path': path})
    metrics.add_metric(name='ClientError', unit=MetricUnit.Count, value=1)
    return build_error(e.message, e.status_code)


def register_error_handlers(app: ApiGatewayResolver) -> None:
    """Map every failure raised by a route function to an error envelope."""

    @app.not_found
    def handle_not_found(_: NotFoundError) -> Response:
        path = app.current_event.path
        return service_error_response(RouteNotFoundError(path), path)

    @app.exception_handler(MethodNotAllowedError)
    def handle_method_not_allowed(e: MethodNotAllowedError) -> Response:
        logger.warning('Method not allowed', extra={
            'path': app.current_event.path,
            'http_method': e.method,
            'allowed_methods': e.allowed_methods,
        })
        metrics.add_metric(name='MethodNotAllowed', unit=MetricUnit.Count, value=1)
        return build_error(e.message, e.status_code, headers={'Allow': ', '.join(e.allowed_methods)})

    @app.exception_handler(ServiceError)
    def handle_service_error(e: ServiceError) -> Response:
        return service_error_response(e, app.current_event.path)

    @app.exception_handler(PydanticValidationError)
    def handle_validation_error(e: PydanticValidationError) -> Response:
        logger.warning('Request validation failed', extra={
            'validation_errors': str(e),
            'error_count': e.error_count(),
        })
        metrics.add_metric(name='ValidationError', unit=MetricUnit.Count, value=1)
        field_errors = '; '.join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        return build_error(f'Request validation failed: {field_errors}', 400)

    @app.exception_handler(Exception)
    def handle_unexpected_error(e: Exception) -> Response:
        logger.exception('Unexpected error in handler', extra={
            'error': str(e),
            'path': app.current_event.path,
        })
        metrics.add_metric(name='UnexpectedError', unit=MetricUnit.Count, value=1)
        return build_error('Internal server error', 500)


def reject_method(app: ApiGatewayResolver, allowed_methods: Iterable[str]) -> Callable[..., Response]:
    """Route function raising 405 for methods a rule does not accept."""
    allowed = sorted(allowed_methods)

    def method_not_allowed(**_path_params: str) -> Response:
        raise MethodNotAllowedError(app.current_event.http_method, allowed)

    return method_not_allowed


def create_resolver(
    routers: Iterable[ResourceRouter],
    base_path: str = '',
    cors_allow_origin: str = '*',
    resolver_cls: Type[ApiGatewayResolver] = APIGatewayRestResolver,
) -> ApiGatewayResolver:
    """
    Build an API Gateway resolver serving ``routers``.

    Args:
        routers: Route groups to include
        base_path: Path prefix stripped before matching; paths without it match too
        cors_allow_origin: Allowed CORS origin
        resolver_cls: ``APIGatewayRestResolver`` or ``APIGatewayHttpResolver``

    Returns:
        Configured resolver
    """
    cors_config = CORSConfig(
        allow_origin=cors_allow_origin,
        max_age=600,
        expose_headers=['X-Request-ID'],
        allow_headers=['Content-Type', 'X-Amz-Date', 'Authorization', 'X-Api-Key', 'X-Amz-Security-Token'],
    )
    strip_prefixes: Optional[List[str]] = [base_path.rstrip('/')] if base_path.strip('/') else None
    app = resolver_cls(cors=cors_config, strip_prefixes=strip_prefixes)
    register_error_handlers(app)

    for router in routers:
        app.include_router(router)
        for rule, allowed in router.allowed_methods.items():
            unrouted = [method for method in ROUTABLE_METHODS if method not in allowed]
            if unrouted:
                app.route(rule, unrouted)(reject_method(app, allowed))

    return app
