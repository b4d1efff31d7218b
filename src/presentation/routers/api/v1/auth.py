"""Auth resource router.

Endpoints:
    POST /api/v1/auth/login            - Username-or-email login
    POST /api/v1/auth/forgot-password  - Request a password reset link
    POST /api/v1/auth/reset-password   - Reset password with a token
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.services.credential_lifecycle import CredentialLifecycle
from src.core.container import get_credential_lifecycle
from src.core.result import Failure, Success
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.auth_schemas import (
    ForgotPasswordRequest,
    ForgotPasswordResponse,
    LoginRequest,
    LoginResponse,
    ResetPasswordRequest,
    ResetPasswordResponse,
)

auth_router = APIRouter(prefix="/auth", tags=["Auth"])


@auth_router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=LoginResponse,
    responses={
        401: {
            "description": "Invalid credentials or password not set",
            "model": ProblemDetails,
        },
    },
    summary="Log in",
    description="Authenticate with username or email and password.",
)
async def login(
    request: Request,
    data: LoginRequest,
    lifecycle: CredentialLifecycle = Depends(get_credential_lifecycle),
) -> LoginResponse | JSONResponse:
    """Log in.

    POST /api/v1/auth/login → 200 OK

    Unknown identifiers and wrong passwords produce the same 401 body.
    """
    result = await lifecycle.login(data.username_or_email, data.password)

    match result:
        case Success(value=login_result):
            return LoginResponse.from_dto(login_result)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )


@auth_router.post(
    "/forgot-password",
    status_code=status.HTTP_200_OK,
    response_model=ForgotPasswordResponse,
    summary="Request password reset",
    description="Always returns the same message to prevent user enumeration.",
)
async def forgot_password(
    data: ForgotPasswordRequest,
    lifecycle: CredentialLifecycle = Depends(get_credential_lifecycle),
) -> ForgotPasswordResponse:
    """Request a password reset link.

    POST /api/v1/auth/forgot-password → 200 OK
    """
    await lifecycle.request_password_reset(data.email)
    return ForgotPasswordResponse()


@auth_router.post(
    "/reset-password",
    status_code=status.HTTP_200_OK,
    response_model=ResetPasswordResponse,
    responses={
        400: {
            "description": "Invalid, used or expired token; invalid password",
            "model": ProblemDetails,
        },
    },
    summary="Reset password",
    description="Consume a reset token and set a new password.",
)
async def reset_password(
    request: Request,
    data: ResetPasswordRequest,
    lifecycle: CredentialLifecycle = Depends(get_credential_lifecycle),
) -> ResetPasswordResponse | JSONResponse:
    """Reset password using the token from the reset link.

    POST /api/v1/auth/reset-password → 200 OK
    """
    result = await lifecycle.reset_password(
        data.token, data.new_password, data.confirm_password
    )

    match result:
        case Success(value=completed):
            return ResetPasswordResponse(
                message=completed.message, email=completed.email
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(
                error=error,
                request=request,
                trace_id=get_trace_id() or "",
            )
