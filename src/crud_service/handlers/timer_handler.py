"""
Timer Handler - scheduled maintenance tasks.

Both tasks are triggered by EventBridge scheduled rules and only log. The
schedules are kept here in six-field NCRONTAB form
(``{second} {minute} {hour} {day} {month} {day-of-week}``) next to the
EventBridge expression used to deploy them.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict

from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.data_classes import EventBridgeEvent
from aws_lambda_powertools.utilities.typing import LambdaContext

from crud_service.handlers.models.env_vars import get_handler_env_vars
from crud_service.handlers.utils.observability import logger, metrics, tracer
from crud_service.handlers.utils.responses import utc_timestamp


@dataclass(frozen=True)
class TimerSchedule:
    """A named schedule."""

    name: str
    ncrontab: str
    eventbridge_expression: str


# Runs every 5 minutes
SCHEDULED_TASK = TimerSchedule(
    name='scheduledTask',
    ncrontab='0 */5 * * * *',
    eventbridge_expression='rate(5 minutes)',
)

# Runs every day at midnight UTC
DAILY_TASK = TimerSchedule(
    name='dailyTask',
    ncrontab='0 0 0 * * *',
    eventbridge_expression='cron(0 0 * * ? *)',
)


def parse_event_time(value: str) -> datetime:
    return datetime.fromisoformat(value.replace('Z', '+00:00'))


def is_past_due(event: EventBridgeEvent, now: datetime | None = None) -> bool:
    """
    Check whether the invocation started too long after its scheduled time.

    Args:
        event: Scheduled EventBridge event
        now: Current time, defaults to the system clock

    Returns:
        True if the delay exceeds ``TIMER_PAST_DUE_SECONDS``
    """
    now = now or datetime.now(timezone.utc)
    delay = (now - parse_event_time(event.time)).total_seconds()
    return delay > get_handler_env_vars().TIMER_PAST_DUE_SECONDS


@logger.inject_lambda_context
@tracer.capture_lambda_handler
@metrics.log_metrics(capture_cold_start_metric=True)
def scheduled_task_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """Task run every 5 minutes."""
    timer = EventBridgeEvent(event)
    logger.info('Timer trigger function executed', extra={
        'executed_at': utc_timestamp(),
        'schedule': SCHEDULED_TASK.ncrontab,
    })

    past_due = is_past_due(timer)
    if past_due:
        logger.warning('Timer trigger is running late!', extra={'scheduled_time': timer.time})
        metrics.add_metric(name='TimerPastDue', unit=MetricUnit.Count, value=1)

    metrics.add_metric(name='ScheduledTaskRun', unit=MetricUnit.Count, value=1)
    logger.info('Scheduled task completed successfully')

    return {
        'task': SCHEDULED_TASK.name,
        'isPastDue': past_due,
        'scheduledTime': timer.time,
    }


@logger.inject_lambda_context
@tracer.capture_lambda_handler
@metrics.log_metrics(capture_cold_start_metric=True)
def daily_task_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """Task run daily at midnight UTC."""
    timer = EventBridgeEvent(event)
    logger.info('Daily timer trigger executed', extra={'executed_at': utc_timestamp()})

    stats = {
        'executionTime': utc_timestamp(),
        'isPastDue': is_past_due(timer),
        'scheduledTime': timer.time,
        'schedule': DAILY_TASK.ncrontab,
    }

    metrics.add_metric(name='DailyTaskRun', unit=MetricUnit.Count, value=1)
    logger.info('Daily task stats', extra={'stats': stats})

    return stats
