"""
Business Logic Layer for User Management.

This module contains the user operations behind the users API. The service
works against an injected entity store so every handler registration and
every test can own its own store.
"""

from typing import Any, Dict, List

from aws_lambda_powertools.metrics import MetricUnit

from crud_service.dal import EntityStore
from crud_service.handlers.utils.errors import ResourceNotFoundError, ValidationError
from crud_service.handlers.utils.observability import logger, metrics, tracer
from crud_service.logic.validation import is_valid_email, validate_required_fields
from crud_service.models.input import CreateUserRequest, UpdateUserRequest
from crud_service.models.user import User

REQUIRED_USER_FIELDS = ('name', 'email')


class UserNotFoundError(ResourceNotFoundError):
    """Raised when a user is not found."""

    def __init__(self, user_id: str):
        super().__init__(resource_type='User', resource_id=user_id)


class UserService:
    """Business logic service for user management."""

    def __init__(self, store: EntityStore[User]):
        """
        Initialize user service.

        Args:
            store: Entity store holding users keyed by id
        """
        self.store = store

    @staticmethod
    def require_user_id(user_id: str | None) -> str:
        """Reject a missing user id."""
        if not user_id:
            raise ValidationError('User ID is required')
        return user_id

    @tracer.capture_method
    def list_users(self) -> List[User]:
        users = self.store.list()
        logger.info('Users retrieved', extra={'user_count': len(users)})
        return users

    @tracer.capture_method
    def get_user(self, user_id: str) -> User:
        """
        Get a user by id.

        Raises:
            UserNotFoundError: If no user has this id
        """
        user = self.store.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    @tracer.capture_method
    def create_user(self, body: Dict[str, Any]) -> User:
        """
        Validate a create request body and store the new user.

        Args:
            body: Decoded request body

        Returns:
            The created user

        Raises:
            ValidationError: If a required field is missing or the email is malformed
        """
        validation_error = validate_required_fields(body, REQUIRED_USER_FIELDS)
        if validation_error:
            raise ValidationError(validation_error)

        if not is_valid_email(body.get('email')):
            raise ValidationError('Invalid email format')

        request = CreateUserRequest.model_validate(body)
        user = User.create(name=request.name, email=request.email)
        self.store.put(user.id, user)

        tracer.put_annotation('user_id', user.id)
        metrics.add_metric(name='UserCreated', unit=MetricUnit.Count, value=1)
        logger.info('User created', extra={'user_id': user.id})
        return user

    @tracer.capture_method
    def update_user(self, user_id: str, body: Dict[str, Any]) -> User:
        """
        Merge the provided fields into an existing user.

        Empty or missing values keep the current field; a provided email must
        still have the email shape.

        Raises:
            ValidationError: If the new email is malformed
            UserNotFoundError: If the user no longer exists
        """
        request = UpdateUserRequest.model_validate(body)
        if request.email and not is_valid_email(request.email):
            raise ValidationError('Invalid email format')

        updated = self.store.update(
            user_id,
            lambda user: user.with_changes(name=request.name, email=request.email),
        )
        if updated is None:
            raise UserNotFoundError(user_id)

        metrics.add_metric(name='UserUpdated', unit=MetricUnit.Count, value=1)
        logger.info('User updated', extra={'user_id': user_id})
        return updated

    @tracer.capture_method
    def delete_user(self, user_id: str) -> None:
        """
        Delete a user.

        Raises:
            UserNotFoundError: If no user has this id
        """
        if not self.store.delete(user_id):
            raise UserNotFoundError(user_id)

        metrics.add_metric(name='UserDeleted', unit=MetricUnit.Count, value=1)
        logger.info('User deleted', extra={'user_id': user_id})
