"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for environment variables used by the
Lambda handlers, parsed and cached with aws_lambda_env_modeler.
"""

from typing import Annotated

from aws_lambda_env_modeler import BaseModel as BaseEnvModel, get_environment_variables
from pydantic import Field


class HandlerEnvVars(BaseEnvModel):
    """Environment variables for Lambda handlers."""

    # Environment name (dev, staging, prod, test)
    ENVIRONMENT: Annotated[str, Field(
        default='dev',
        description='Deployment environment name',
        pattern=r'^(dev|staging|prod|test)$'
    )] = 'dev'

    # Application version
    APP_VERSION: Annotated[str, Field(
        default='1.0.0',
        description='Application version string'
    )] = '1.0.0'

    # Service name for observability
    POWERTOOLS_SERVICE_NAME: Annotated[str, Field(
        default='crud-service',
        description='Service name for AWS Powertools'
    )] = 'crud-service'

    # Log level for AWS Powertools Logger
    LOG_LEVEL: Annotated[str, Field(
        default='INFO',
        description='Log level for application logging',
        pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$'
    )] = 'INFO'

    # Path prefix in front of every HTTP route
    API_BASE_PATH: Annotated[str, Field(
        default='/api',
        description='Base path stripped from request paths before route matching',
        pattern=r'^(/[A-Za-z0-9_.~-]+)*$'
    )] = '/api'

    # API Gateway settings
    CORS_ALLOW_ORIGIN: Annotated[str, Field(
        default='*',
        description='CORS allowed origins for API responses'
    )] = '*'

    # Queue consumer settings
    QUEUE_NAME: Annotated[str, Field(
        default='orders-queue',
        min_length=1,
        description='Name of the queue consumed by the queue handler'
    )] = 'orders-queue'

    DEAD_LETTER_MALFORMED_MESSAGES: Annotated[str, Field(
        default='false',
        description='Fail messages without an orderId so they reach the dead-letter queue (true/false)',
        pattern=r'^(true|false)$'
    )] = 'false'

    # Timer settings
    TIMER_PAST_DUE_SECONDS: Annotated[int, Field(
        default=60,
        description='Delay after the scheduled time beyond which a timer run counts as past due',
        ge=1,
        le=3600
    )] = 60

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == 'prod'

    @property
    def dead_letter_malformed_messages(self) -> bool:
        """Check if malformed queue messages should fail instead of being dropped."""
        return self.DEAD_LETTER_MALFORMED_MESSAGES.lower() == 'true'


# Utility function to get typed environment variables
def get_handler_env_vars() -> HandlerEnvVars:
    """
    Get typed environment variables for Lambda handlers.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=HandlerEnvVars)
