"""User management router.

Failures raised by the service (validation, not found, database) are turned
into error responses by the exception handlers registered on the app.
"""

from fastapi import APIRouter, Response, status

from ..dependencies import ApiResponseDep, UserServiceDep
from ..logging_config import get_logger
from ..schemas.user_schemas import CreateUserRequest, UserResponse

logger = get_logger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={
        400: {"description": "Invalid user data"},
        500: {"description": "Internal server error"},
    },
)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserResponse,
    summary="Create a user",
    description="Store a new user under a caller-assigned identifier",
)
async def create_user(
    request: CreateUserRequest,
    user_service: UserServiceDep,
    responses: ApiResponseDep,
) -> Response:
    """Create a user.

    Returns:
        Response: 201 with the stored user

    Example:
        POST /users {"id": "u1", "name": "Alice"}
        -> {"id": "u1", "name": "Alice", "createdAt": "...", "updatedAt": "..."}
    """
    logger.info(f"Creating user: {request.id}")
    user = await user_service.create_user(request)
    return responses.created(UserResponse.from_user(user))


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get a user",
    description="Fetch a user by identifier",
    responses={404: {"description": "User not found"}},
)
async def get_user(
    user_id: str,
    user_service: UserServiceDep,
    responses: ApiResponseDep,
) -> Response:
    """Get a user by identifier."""
    user = await user_service.get_user_by_id(user_id)
    return responses.ok(UserResponse.from_user(user))
