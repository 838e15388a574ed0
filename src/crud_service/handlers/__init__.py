"""
AWS Lambda Handlers Module.

This module contains the Lambda function handlers that serve as entry points
for the serverless application:

- api_handler.lambda_handler: every HTTP route (API Gateway proxy events)
- queue_handler.lambda_handler: the orders queue consumer (SQS)
- timer_handler.scheduled_task_handler / daily_task_handler: scheduled tasks (EventBridge)

The handlers use AWS Lambda Powertools for structured logging with
correlation IDs, tracing and custom metrics.
"""

__version__ = "1.0.0"

# Re-export handler utilities for convenience
from crud_service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
