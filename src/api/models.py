"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
JSON bodies use camelCase keys; Python attributes use snake_case.

Request fields are all optional at the schema level: required-field
enforcement belongs to the domain, which answers with a 400 MissingFields
error instead of FastAPI's 422.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.domain.models import BusinessRegistration, IndividualRegistration


class CamelModel(BaseModel):
    """Base model reading and writing camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class IndividualRegisterRequest(CamelModel):
    """Request model for individual account registration."""

    email: str | None = Field(default=None, description="Login email (required)")
    password: str | None = Field(default=None, description="Account password (required)")
    full_name: str | None = Field(default=None, description="Full name (required)")
    date_of_birth: str | None = None
    gender: str | None = None
    national_id: str | None = Field(default=None, description="National ID number (required)")
    occupation: str | None = None
    address: str | None = None
    phone_number: str | None = None

    def to_domain(self) -> IndividualRegistration:
        return IndividualRegistration(**self.model_dump())


class BusinessRegisterRequest(CamelModel):
    """Request model for business account registration."""

    admin_email: str | None = Field(default=None, description="Admin login email (required)")
    admin_password: str | None = Field(default=None, description="Admin password (required)")
    company_name: str | None = Field(default=None, description="Company name (required)")
    tax_code: str | None = Field(default=None, description="Company tax code (required)")
    industry: str | None = None
    registration_number: str | None = None
    company_address: str | None = Field(default=None, description="Company address (required)")
    company_phone: str | None = None
    company_email: str | None = Field(
        default=None, description="Official company email, may differ from adminEmail"
    )

    def to_domain(self) -> BusinessRegistration:
        return BusinessRegistration(**self.model_dump())


class IndividualRegisterResponse(CamelModel):
    """Response model for successful individual registration."""

    message: str
    user_id: str
    email: str


class BusinessRegisterResponse(CamelModel):
    """Response model for successful business registration."""

    message: str
    admin_user_id: str
    admin_email: str
    company_name: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
    detail: str
