"""
Sample Handler - greeting and data echo routes.
"""

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.metrics import MetricUnit

from crud_service.handlers.models.env_vars import get_handler_env_vars
from crud_service.handlers.utils.errors import ValidationError
from crud_service.handlers.utils.observability import logger, metrics, tracer
from crud_service.handlers.utils.responses import build_success, utc_timestamp
from crud_service.handlers.utils.router import ResourceRouter, query_params, read_json

HELLO_PATH = '/hello'
DATA_PATH = '/data'


def build_sample_router() -> ResourceRouter:
    """Build the router for ``/hello`` and ``/data``."""
    router = ResourceRouter()

    @router.get(HELLO_PATH)
    @tracer.capture_method
    def hello() -> Response:
        """Greet the caller, by name when ``?name=`` is given."""
        logger.info('HTTP GET trigger function processed a request.')
        metrics.add_metric(name='HelloRouteCount', unit=MetricUnit.Count, value=1)

        name = query_params(router.current_event).get('name') or 'World'

        return build_success({
            'message': f'Hello, {name}!',
            'method': router.current_event.http_method,
            'version': get_handler_env_vars().APP_VERSION,
        })

    @router.post(DATA_PATH)
    @tracer.capture_method
    def receive_data() -> Response:
        """Accept a JSON document that carries a ``name``."""
        logger.info('HTTP POST trigger function processed a request.')

        body = read_json(router.current_event, 'Invalid JSON in request body')
        if not isinstance(body, dict) or not body.get('name'):
            raise ValidationError('Please provide a name in the request body')

        return build_success({
            'message': 'Data received successfully',
            'receivedData': body,
            'processedAt': utc_timestamp(),
        }, 201)

    return router
