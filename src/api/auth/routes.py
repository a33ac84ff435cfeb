"""
Auth routes.

Defines the REST endpoints for individual and business account registration.

Handlers are plain ``def`` functions: FastAPI runs them in its threadpool,
so bcrypt hashing does not block the event loop.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_registration_service
from src.api.models import (
    BusinessRegisterRequest,
    BusinessRegisterResponse,
    ErrorResponse,
    IndividualRegisterRequest,
    IndividualRegisterResponse,
)
from src.domain.exceptions import EmailAlreadyRegistered, MissingFields
from src.domain.registration import RegistrationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

INTERNAL_ERROR_DETAIL = "Internal server error. Please try again later."

_error_responses = {
    400: {"model": ErrorResponse, "description": "Missing required fields or email already registered"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}


def error_response(status_code: int, error: str, detail: str) -> JSONResponse:
    """Build the JSON error body shared by every registration failure."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, detail=detail).model_dump(),
    )


@router.post(
    "/register/individual",
    response_model=IndividualRegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_error_responses,
    summary="Register an individual account",
    description="Create an individual customer account. "
    "email, password, fullName and nationalId are required.",
)
def register_individual(
    request_data: IndividualRegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> IndividualRegisterResponse | JSONResponse:
    """
    Register an individual customer account.

    Returns the new userId and email. The password is never echoed back.
    """
    try:
        outcome = service.register_individual(request_data.to_domain())
    except MissingFields:
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "MissingFields",
            "Please provide all required fields: email, password, fullName and nationalId.",
        )
    except EmailAlreadyRegistered:
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "EmailAlreadyRegistered",
            "This email is already registered.",
        )
    except Exception:
        logger.exception("Individual registration failed")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "InternalError", INTERNAL_ERROR_DETAIL
        )

    return IndividualRegisterResponse(
        message="Individual account registered successfully",
        user_id=outcome.user_id,
        email=outcome.email,
    )


@router.post(
    "/register/business",
    response_model=BusinessRegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_error_responses,
    summary="Register a business account",
    description="Create a business account together with its first admin user. "
    "adminEmail, adminPassword, companyName, taxCode and companyAddress are required.",
)
def register_business(
    request_data: BusinessRegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> BusinessRegisterResponse | JSONResponse:
    """
    Register a business account and its admin user.

    Returns the admin userId, admin email and company name.
    """
    try:
        outcome = service.register_business(request_data.to_domain())
    except MissingFields:
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "MissingFields",
            "Please provide all required fields: adminEmail, adminPassword, "
            "companyName, taxCode and companyAddress.",
        )
    except EmailAlreadyRegistered:
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "EmailAlreadyRegistered",
            "This admin email is already in use.",
        )
    except Exception:
        logger.exception("Business registration failed")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "InternalError", INTERNAL_ERROR_DETAIL
        )

    return BusinessRegisterResponse(
        message="Business account registered successfully",
        admin_user_id=outcome.admin_user_id,
        admin_email=outcome.admin_email,
        company_name=outcome.company_name,
    )
