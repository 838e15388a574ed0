"""
Users Handler - user management routes.

GET, POST, PUT and DELETE on ``/users`` and ``/users/<user_id>``. The routes
are bound to the entity store they operate on when the router is built.
"""

from typing import Optional

from aws_lambda_powertools.event_handler import Response

from crud_service.dal import EntityStore
from crud_service.handlers.utils.observability import logger, tracer
from crud_service.handlers.utils.responses import build_success
from crud_service.handlers.utils.router import ResourceRouter, read_json_object
from crud_service.logic.user_service import UserService
from crud_service.models.user import User

USERS_PATH = '/users'
USER_PATH = '/users/<user_id>'


def build_user_router(store: EntityStore[User]) -> ResourceRouter:
    """
    Build the users API router.

    Args:
        store: Entity store holding users

    Returns:
        Router with the users routes bound to ``store``
    """
    router = ResourceRouter()
    user_service = UserService(store)

    @router.get(USERS_PATH)
    @router.get(USER_PATH)
    @tracer.capture_method
    def get_users(user_id: Optional[str] = None) -> Response:
        """Get all users, or one user when an id is given."""
        logger.info('GET users request received')

        if user_id:
            tracer.put_annotation('user_id', user_id)
            return build_success(user_service.get_user(user_id))

        return build_success(user_service.list_users())

    @router.post(USERS_PATH)
    @router.post(USER_PATH)
    @tracer.capture_method
    def create_user(user_id: Optional[str] = None) -> Response:
        """Create a new user; an id in the path is ignored."""
        logger.info('POST user request received')

        body = read_json_object(router.current_event)
        user = user_service.create_user(body)

        return build_success(user, 201, headers={'Location': f'{USERS_PATH}/{user.id}'})

    @router.put(USERS_PATH)
    @router.put(USER_PATH)
    @tracer.capture_method
    def update_user(user_id: Optional[str] = None) -> Response:
        """Update an existing user."""
        logger.info('PUT user request received')

        user_id = user_service.require_user_id(user_id)
        # Existence is checked before the body is read: unknown ids are 404 whatever the body.
        user_service.get_user(user_id)

        body = read_json_object(router.current_event)
        return build_success(user_service.update_user(user_id, body))

    @router.delete(USERS_PATH)
    @router.delete(USER_PATH)
    @tracer.capture_method
    def delete_user(user_id: Optional[str] = None) -> Response:
        """Delete a user."""
        logger.info('DELETE user request received')

        user_id = user_service.require_user_id(user_id)
        user_service.delete_user(user_id)

        return build_success({'message': 'User deleted successfully', 'id': user_id})

    return router
