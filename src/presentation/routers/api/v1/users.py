"""Users resource router.

Endpoints:
    GET    /api/v1/users                          - List users
    POST   /api/v1/users                          - Create user, send invitation
    POST   /api/v1/users/set-password             - Set first password with token
    GET    /api/v1/users/{user_id}                - Get user
    PUT    /api/v1/users/{user_id}                - Update user
    DELETE /api/v1/users/{user_id}                - Delete user
    POST   /api/v1/users/{user_id}/set-password-tokens - Resend invitation
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands import (
    CreateUser,
    DeleteUser,
    ReissueSetPasswordToken,
    UpdateUser,
)
from src.application.commands.handlers import (
    CreateUserHandler,
    DeleteUserHandler,
    ReissueSetPasswordTokenHandler,
    UpdateUserHandler,
)
from src.application.queries import GetUser, ListUsers
from src.application.queries.handlers import GetUserHandler, ListUsersHandler
from src.application.services.credential_lifecycle import CredentialLifecycle
from src.core.container import (
    get_create_user_handler,
    get_credential_lifecycle,
    get_delete_user_handler,
    get_get_user_handler,
    get_list_users_handler,
    get_reissue_set_password_token_handler,
    get_update_user_handler,
)
from src.core.result import Failure, Success
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.user_schemas import (
    SetPasswordRequest,
    SetPasswordResponse,
    SetPasswordTokenCreateResponse,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

users_router = APIRouter(prefix="/users", tags=["Users"])


@users_router.get(
    "",
    response_model=list[UserResponse],
    summary="List users",
)
async def list_users(
    request: Request,
    handler: ListUsersHandler = Depends(get_list_users_handler),
) -> list[UserResponse] | JSONResponse:
    """List users ordered by username.

    GET /api/v1/users → 200 OK
    """
    result = await handler.handle(ListUsers())
    match result:
        case Success(value=views):
            return [UserResponse.from_dto(view) for view in views]
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


@users_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserResponse,
    responses={
        400: {"description": "Invalid company or privacy", "model": ProblemDetails},
        409: {"description": "Username or email taken", "model": ProblemDetails},
    },
    summary="Create user",
    description="Create a user without password and send the set-password link.",
)
async def create_user(
    request: Request,
    data: UserCreateRequest,
    handler: CreateUserHandler = Depends(get_create_user_handler),
) -> UserResponse | JSONResponse:
    """Create a user.

    POST /api/v1/users → 201 Created
    """
    command = CreateUser(
        username=data.username,
        email=data.email,
        role=data.role,
        company_id=data.company_id,
        privacy_policy_accepted=data.privacy_policy_accepted,
    )

    result = await handler.handle(command)

    match result:
        case Success(value=view):
            return UserResponse.from_dto(view)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


@users_router.post(
    "/set-password",
    status_code=status.HTTP_200_OK,
    response_model=SetPasswordResponse,
    responses={
        400: {
            "description": "Invalid, used or expired token; invalid password",
            "model": ProblemDetails,
        },
    },
    summary="Set password",
    description="Consume the invitation token and establish the first password.",
)
async def set_password(
    request: Request,
    data: SetPasswordRequest,
    lifecycle: CredentialLifecycle = Depends(get_credential_lifecycle),
) -> SetPasswordResponse | JSONResponse:
    """Set the first password.

    POST /api/v1/users/set-password → 200 OK
    """
    result = await lifecycle.set_password(data.token, data.new_password)

    match result:
        case Success(value=established):
            return SetPasswordResponse(message=established.message)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


@users_router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"description": "User not found", "model": ProblemDetails}},
    summary="Get user",
)
async def get_user(
    request: Request,
    user_id: UUID,
    handler: GetUserHandler = Depends(get_get_user_handler),
) -> UserResponse | JSONResponse:
    """Get a user.

    GET /api/v1/users/{user_id} → 200 OK
    """
    result = await handler.handle(GetUser(user_id=user_id))

    match result:
        case Success(value=view):
            return UserResponse.from_dto(view)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


@users_router.put(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={
        400: {
            "description": "Invalid company, role or password",
            "model": ProblemDetails,
        },
        404: {"description": "User not found", "model": ProblemDetails},
        409: {"description": "Email taken", "model": ProblemDetails},
    },
    summary="Update user",
)
async def update_user(
    request: Request,
    user_id: UUID,
    data: UserUpdateRequest,
    handler: UpdateUserHandler = Depends(get_update_user_handler),
) -> Response:
    """Partially update a user.

    PUT /api/v1/users/{user_id} → 204 No Content
    """
    command = UpdateUser(
        user_id=user_id,
        email=data.email,
        privacy_policy_accepted=data.privacy_policy_accepted,
        role=data.role,
        company_id=data.company_id,
        remove_company=data.remove_company,
        new_password=data.new_password,
    )

    result = await handler.handle(command)

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


@users_router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={404: {"description": "User not found", "model": ProblemDetails}},
    summary="Delete user",
)
async def delete_user(
    request: Request,
    user_id: UUID,
    handler: DeleteUserHandler = Depends(get_delete_user_handler),
) -> Response:
    """Delete a user.

    DELETE /api/v1/users/{user_id} → 204 No Content
    """
    result = await handler.handle(DeleteUser(user_id=user_id))

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


@users_router.post(
    "/{user_id}/set-password-tokens",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=SetPasswordTokenCreateResponse,
    responses={
        404: {"description": "User not found", "model": ProblemDetails},
        409: {"description": "Password already set", "model": ProblemDetails},
    },
    summary="Resend invitation",
    description="Issue a new set-password token; the previous link stops working.",
)
async def create_set_password_token(
    request: Request,
    user_id: UUID,
    handler: ReissueSetPasswordTokenHandler = Depends(
        get_reissue_set_password_token_handler
    ),
) -> SetPasswordTokenCreateResponse | JSONResponse:
    """Resend the invitation.

    POST /api/v1/users/{user_id}/set-password-tokens → 202 Accepted
    """
    result = await handler.handle(ReissueSetPasswordToken(user_id=user_id))

    match result:
        case Success():
            return SetPasswordTokenCreateResponse()
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )
