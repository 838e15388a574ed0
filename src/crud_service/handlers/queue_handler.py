"""
Queue Handler - orders queue consumer and the mock enqueue route.

The consumer is triggered by SQS with a batch of records. Records are handled
with the Powertools batch processor: a record whose handler raises is
reported in ``batchItemFailures`` so SQS delivers it again, and once the
queue's ``maxReceiveCount`` is exceeded the redrive policy moves it to the
dead-letter queue. Failures here are therefore re-raised on purpose, unlike
the HTTP routes which turn every failure into a response.

Example message: ``{"orderId": "12345", "status": "pending"}``
"""

import json
from typing import Any, Dict, Optional

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.batch import BatchProcessor, EventType, process_partial_response
from aws_lambda_powertools.utilities.data_classes.sqs_event import SQSRecord
from aws_lambda_powertools.utilities.typing import LambdaContext

from crud_service.handlers.models.env_vars import get_handler_env_vars
from crud_service.handlers.utils.errors import MalformedMessageError
from crud_service.handlers.utils.observability import logger, metrics, tracer
from crud_service.handlers.utils.responses import build_success
from crud_service.handlers.utils.router import ResourceRouter, read_json_object
from crud_service.models.input import QueueMessage

ENQUEUE_PATH = '/enqueue'

processor = BatchProcessor(event_type=EventType.SQS)


def reject_malformed_message(reason: str, message_id: Optional[str] = None) -> None:
    """
    Apply the malformed-message policy.

    Malformed messages are logged and acknowledged, or raised when
    ``DEAD_LETTER_MALFORMED_MESSAGES`` is enabled so they follow the
    retry/dead-letter path.
    """
    logger.error(f'Invalid message: {reason}', extra={'message_id': message_id})
    metrics.add_metric(name='QueueMessageMalformed', unit=MetricUnit.Count, value=1)

    if get_handler_env_vars().dead_letter_malformed_messages:
        raise MalformedMessageError(f'Invalid message: {reason}', message_id=message_id)


@tracer.capture_method
def process_queue_message(message: QueueMessage, message_id: Optional[str] = None) -> bool:
    """
    Process one order message.

    Returns:
        True if the message was processed, False if it was dropped
    """
    if not message.order_id:
        reject_malformed_message('missing orderId', message_id)
        return False

    tracer.put_annotation('order_id', message.order_id)
    logger.info(f'Processing order: {message.order_id}', extra={
        'order_id': message.order_id,
        'order_status': message.status or 'unknown',
        'message_id': message_id,
    })

    metrics.add_metric(name='QueueMessageProcessed', unit=MetricUnit.Count, value=1)
    logger.info(f'Order {message.order_id} processed successfully')
    return True


def decode_message_body(record: SQSRecord) -> Optional[Dict[str, Any]]:
    """
    Decode the record body.

    Returns:
        The body as a JSON object, or None when it is JSON but not an object

    Raises:
        ValueError: If the body is not valid JSON
    """
    payload = json.loads(record.body)
    return payload if isinstance(payload, dict) else None


@tracer.capture_method
def record_handler(record: SQSRecord) -> bool:
    """Handle a single SQS record; any exception marks the record as failed."""
    logger.info('Queue trigger function processed message', extra={
        'message_id': record.message_id,
        'body': record.body,
    })

    try:
        payload = decode_message_body(record)
        if payload is None:
            reject_malformed_message('body is not a JSON object', record.message_id)
            return False

        return process_queue_message(QueueMessage.model_validate(payload), record.message_id)

    except Exception as e:
        logger.exception('Error processing queue message', extra={
            'message_id': record.message_id,
            'error': str(e),
        })
        metrics.add_metric(name='QueueMessageFailed', unit=MetricUnit.Count, value=1)
        # Re-raised so the message is retried and eventually dead-lettered
        raise


@logger.inject_lambda_context
@tracer.capture_lambda_handler
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    SQS Lambda handler for the orders queue.

    Args:
        event: SQS event with a batch of records
        context: Lambda context object

    Returns:
        Partial batch response listing the records to redeliver
    """
    logger.info('Queue batch received', extra={
        'queue_name': get_handler_env_vars().QUEUE_NAME,
        'record_count': len(event.get('Records') or []),
    })

    return process_partial_response(
        event=event,
        record_handler=record_handler,
        processor=processor,
        context=context,
    )


def build_enqueue_router() -> ResourceRouter:
    """Build the router for the mock ``/enqueue`` route."""
    router = ResourceRouter()

    @router.post(ENQUEUE_PATH)
    @tracer.capture_method
    def enqueue_message() -> Response:
        """Validate a queue message and report what would be enqueued."""
        logger.info('Enqueue message endpoint called')

        body = read_json_object(router.current_event)
        QueueMessage.model_validate(body)

        return build_success({
            'message': 'Message would be enqueued',
            'queueName': get_handler_env_vars().QUEUE_NAME,
            'data': body,
            'note': 'This is a mock response. Implement queue client to actually enqueue messages.',
        })

    return router
