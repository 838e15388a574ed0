"""
Shared Powertools instances for the HTTP, queue and timer entry points.

Powertools reads its settings from the standard environment variables (``POWERTOOLS_SERVICE_NAME``, ``LOG_LEVEL``,
``POWERTOOLS_TRACE_DISABLED``).
"""

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

# Takes precedence over POWERTOOLS_METRICS_NAMESPACE
METRICS_NAMESPACE = 'CrudService'

# Timestamps in UTC to match the response envelopes
logger: Logger = Logger(utc=True, log_uncaught_exceptions=True)

tracer: Tracer = Tracer()

metrics: Metrics = Metrics(namespace=METRICS_NAMESPACE)
