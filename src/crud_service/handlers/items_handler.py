"""
Items Handler - sample catalogue routes.

Items are not persisted: reads serve a fixed sample catalogue and writes echo
the request body back with a generated identifier and a timestamp.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from aws_lambda_powertools.event_handler import Response

from crud_service.handlers.utils.errors import ValidationError
from crud_service.handlers.utils.observability import logger, tracer
from crud_service.handlers.utils.responses import build_success, utc_timestamp
from crud_service.handlers.utils.router import ResourceRouter, query_params, read_json_object
from crud_service.logic.ids import generate_id
from crud_service.models.item import Item
from crud_service.models.output import PaginatedResponse

ITEMS_PATH = '/items'
ITEM_PATH = '/items/<item_id>'
ITEM_ID_PREFIX = 'item'

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

SAMPLE_ITEMS: List[Item] = [
    Item(id='1', name='Item 1', created_at=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)),
    Item(id='2', name='Item 2', created_at=datetime(2024, 1, 16, 14, 45, tzinfo=timezone.utc)),
    Item(id='3', name='Item 3', created_at=datetime(2024, 1, 17, 9, 15, tzinfo=timezone.utc)),
]


def parse_pagination(params: Dict[str, str]) -> Tuple[int, int]:
    """
    Read ``page`` and ``pageSize`` from the query string.

    Raises:
        ValidationError: If either value is not an integer in range
    """
    try:
        page = int(params.get('page', 1))
        page_size = int(params.get('pageSize', DEFAULT_PAGE_SIZE))
    except (TypeError, ValueError):
        raise ValidationError('Invalid pagination parameters')

    if page < 1 or not 1 <= page_size <= MAX_PAGE_SIZE:
        raise ValidationError('Invalid pagination parameters')
    return page, page_size


def build_item_router() -> ResourceRouter:
    """Build the items API router."""
    router = ResourceRouter()

    @router.get(ITEMS_PATH)
    @router.get(ITEM_PATH)
    @tracer.capture_method
    def get_items(item_id: Optional[str] = None) -> Response:
        """Get one sample item, or a page of the catalogue."""
        logger.info('GET items request received')

        if item_id:
            item = Item(
                id=item_id,
                name=f'Item {item_id}',
                description='This is a sample item',
                created_at=datetime.now(timezone.utc),
            )
            return build_success(item)

        page, page_size = parse_pagination(query_params(router.current_event))
        return build_success(PaginatedResponse[Item].from_sequence(SAMPLE_ITEMS, page, page_size))

    @router.post(ITEMS_PATH)
    @router.post(ITEM_PATH)
    @tracer.capture_method
    def create_item(item_id: Optional[str] = None) -> Response:
        """Echo a new item built from the request body."""
        logger.info('POST item request received')

        body = read_json_object(router.current_event)
        item = {'id': generate_id(ITEM_ID_PREFIX), **body, 'createdAt': utc_timestamp()}
        logger.info('Item created', extra={'item_id': item['id']})

        return build_success(item, 201)

    @router.put(ITEMS_PATH)
    @router.put(ITEM_PATH)
    @tracer.capture_method
    def update_item(item_id: Optional[str] = None) -> Response:
        """Echo an item update."""
        logger.info('PUT item request received')

        if not item_id:
            raise ValidationError('ID is required for PUT requests')

        body = read_json_object(router.current_event)
        return build_success({'id': item_id, **body, 'updatedAt': utc_timestamp()})

    @router.delete(ITEMS_PATH)
    @router.delete(ITEM_PATH)
    @tracer.capture_method
    def delete_item(item_id: Optional[str] = None) -> Response:
        """Acknowledge an item deletion."""
        logger.info('DELETE item request received')

        if not item_id:
            raise ValidationError('ID is required for DELETE requests')

        return build_success({
            'message': f'Item {item_id} deleted successfully',
            'id': item_id,
            'deletedAt': utc_timestamp(),
        })

    return router
