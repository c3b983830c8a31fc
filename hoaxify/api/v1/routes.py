"""
API v1 routes.

Defines REST endpoints for the user registration API.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from hoaxify.api.dependencies import get_locale, get_registration_service
from hoaxify.api.models import MessageResponse, RegisterRequest, ValidationErrorResponse
from hoaxify.domain.models import RegistrationOutcome
from hoaxify.domain.registration import RegistrationService

router = APIRouter(tags=["users"])


@router.post(
    "/users",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ValidationErrorResponse, "description": "Validation error"},
        502: {"model": MessageResponse, "description": "Activation email could not be sent"},
    },
    summary="Register a new user",
    description="Create an inactive account and send its activation token by email. "
    "The account is only kept if the email is accepted.",
)
def register(
    request_data: RegisterRequest,
    locale: str = Depends(get_locale),
    service: RegistrationService = Depends(get_registration_service),
) -> MessageResponse | JSONResponse:
    """
    Register a new user and send the activation email.

    - **username**: 4 to 32 characters
    - **email**: Valid, unused email address
    - **password**: At least 6 characters with lowercase, uppercase and digit

    Messages are localized from the Accept-Language header.
    """
    result = service.register(request_data.to_domain(), locale)

    if result.outcome is RegistrationOutcome.VALIDATION_FAILED:
        body = ValidationErrorResponse(validation_errors=result.validation_errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=body.model_dump(by_alias=True),
        )

    if result.outcome is RegistrationOutcome.EMAIL_FAILURE:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content=MessageResponse(message=result.message).model_dump(),
        )

    return MessageResponse(message=result.message)
