"""
API Handler - Lambda entry point for every HTTP route.

The user store is created once, when this module is first imported by the
Lambda runtime, and shared by the REST (v1) and HTTP API (v2) resolvers.
``create_app`` builds an independent resolver and store for tests.
"""

from typing import Any, Dict, Optional, Type

from aws_lambda_powertools.event_handler import APIGatewayHttpResolver, APIGatewayRestResolver
from aws_lambda_powertools.event_handler.api_gateway import ApiGatewayResolver
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from crud_service.dal import EntityStore, get_entity_store
from crud_service.handlers.items_handler import build_item_router
from crud_service.handlers.models.env_vars import get_handler_env_vars
from crud_service.handlers.queue_handler import build_enqueue_router
from crud_service.handlers.samples_handler import build_sample_router
from crud_service.handlers.users_handler import build_user_router
from crud_service.handlers.utils.observability import logger, metrics, tracer
from crud_service.handlers.utils.router import create_resolver
from crud_service.models.user import User


def create_app(
    user_store: Optional[EntityStore[User]] = None,
    base_path: Optional[str] = None,
    resolver_cls: Type[ApiGatewayResolver] = APIGatewayRestResolver,
) -> ApiGatewayResolver:
    """
    Build the resolver with every HTTP route registered.

    Args:
        user_store: Store backing the users API; a new empty store when omitted
        base_path: Path prefix stripped before matching; ``API_BASE_PATH`` when omitted
        resolver_cls: Resolver for the API Gateway event format

    Returns:
        Configured resolver
    """
    env_vars = get_handler_env_vars()
    if base_path is None:
        base_path = env_vars.API_BASE_PATH

    routers = [
        build_sample_router(),
        build_item_router(),
        build_user_router(user_store if user_store is not None else get_entity_store()),
        build_enqueue_router(),
    ]
    app = create_resolver(routers, base_path, env_vars.CORS_ALLOW_ORIGIN, resolver_cls)

    logger.debug('HTTP routes registered', extra={
        'routes': sorted(rule for router in routers for rule in router.allowed_methods),
    })
    return app


# Process-lifetime state, lost when the execution environment is recycled
user_store: EntityStore[User] = get_entity_store()
app = create_app(user_store=user_store)
http_app = create_app(user_store=user_store, resolver_cls=APIGatewayHttpResolver)


@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@tracer.capture_lambda_handler
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    Args:
        event: API Gateway REST or HTTP API proxy event
        context: Lambda context object

    Returns:
        API Gateway proxy response
    """
    metrics.add_metric(name='RequestCount', unit=MetricUnit.Count, value=1)
    tracer.put_annotation('environment', get_handler_env_vars().ENVIRONMENT)

    resolver = http_app if event.get('version') == '2.0' else app
    response = resolver.resolve(event, context)

    if response['statusCode'] < 400:
        metrics.add_metric(name='RequestSuccess', unit=MetricUnit.Count, value=1)
    else:
        metrics.add_metric(name='RequestError', unit=MetricUnit.Count, value=1)

    logger.info('Request completed', extra={'status_code': response['statusCode']})
    return response
