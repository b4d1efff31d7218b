"""Unit tests for application layer errors.

Tests ApplicationError categorization of domain errors.
"""

import pytest

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.errors.resource_errors import (
    company_not_found,
    company_required,
    unknown_company_reference,
    user_not_found,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, ConflictError, DomainError
from src.domain.enums import TokenPurpose
from src.domain.errors import CredentialError, CredentialMessages, NotifyError
from tests.utils.doubles import make_user


@pytest.mark.unit
class TestApplicationErrorCode:
    """Unit tests for ApplicationErrorCode enum."""

    def test_enum_values_are_snake_case(self):
        for code in ApplicationErrorCode:
            assert code.value == code.value.lower()
            assert " " not in code.value

    def test_every_code_is_produced_by_categorization(self):
        assert {code.value for code in ApplicationErrorCode} == {
            "command_validation_failed",
            "command_execution_failed",
            "unauthorized",
            "not_found",
            "conflict",
            "external_service_error",
        }


@pytest.mark.unit
class TestFromDomainError:
    """ApplicationError.from_domain_error picks the category."""

    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (company_required(), ApplicationErrorCode.COMMAND_VALIDATION_FAILED),
            (
                unknown_company_reference(make_user().id),
                ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
            ),
            (user_not_found(make_user().id), ApplicationErrorCode.NOT_FOUND),
            (company_not_found(make_user().id), ApplicationErrorCode.NOT_FOUND),
            (
                ConflictError(
                    code=ErrorCode.USERNAME_ALREADY_EXISTS,
                    message="taken",
                    resource_type="User",
                ),
                ApplicationErrorCode.CONFLICT,
            ),
            (
                AuthenticationError(
                    code=ErrorCode.INVALID_CREDENTIALS, message="Invalid credentials"
                ),
                ApplicationErrorCode.UNAUTHORIZED,
            ),
        ],
    )
    def test_categorizes_common_errors(self, error, expected):
        assert ApplicationError.from_domain_error(error).code is expected

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            (ErrorCode.TOKEN_NOT_FOUND, ApplicationErrorCode.COMMAND_VALIDATION_FAILED),
            (ErrorCode.TOKEN_EXPIRED, ApplicationErrorCode.COMMAND_VALIDATION_FAILED),
            (ErrorCode.INVALID_CREDENTIALS, ApplicationErrorCode.UNAUTHORIZED),
            (ErrorCode.PASSWORD_NOT_SET, ApplicationErrorCode.UNAUTHORIZED),
        ],
    )
    def test_categorizes_credential_errors(self, code, expected):
        error = CredentialError(
            code=code, message="x", purpose=TokenPurpose.SET_PASSWORD
        )

        assert ApplicationError.from_domain_error(error).code is expected

    def test_notify_error_is_external(self):
        error = NotifyError(
            code=ErrorCode.NOTIFY_FAILED, message="down", recipient="a@b.co"
        )

        assert (
            ApplicationError.from_domain_error(error).code
            is ApplicationErrorCode.EXTERNAL_SERVICE_ERROR
        )

    def test_unknown_error_is_execution_failure(self):
        error = DomainError(code=ErrorCode.VALIDATION_FAILED, message="odd")

        assert (
            ApplicationError.from_domain_error(error).code
            is ApplicationErrorCode.COMMAND_EXECUTION_FAILED
        )

    def test_keeps_message_and_source(self):
        error = CredentialError(
            code=ErrorCode.TOKEN_EXPIRED,
            message=CredentialMessages.TOKEN_EXPIRED,
            purpose=TokenPurpose.RESET_PASSWORD,
        )

        app_error = ApplicationError.from_domain_error(error)

        assert app_error.message == CredentialMessages.TOKEN_EXPIRED
        assert app_error.domain_error is error
