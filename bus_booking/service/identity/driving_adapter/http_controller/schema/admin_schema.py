"""
Admin API Schemas - Pydantic models for request/response
"""

from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, SecretStr


class CreateAdminRequest(BaseModel):
    email: EmailStr
    password: SecretStr = Field(
        ...,
        min_length=8,
        max_length=72,
        description='Password must be 8-72 characters (bcrypt limit)',
    )
    full_name: str = Field(..., min_length=1, max_length=255)

    model_config = {
        'json_schema_extra': {
            'example': {
                'email': 'admin@busbooking.com',
                'password': 'P@ssw0rd',
                'full_name': 'Ama Mensah',
            }
        }
    }


class LoginRequest(BaseModel):
    email: EmailStr
    password: SecretStr = Field(
        ..., min_length=1, max_length=72, description='Admin password (max 72 chars)'
    )

    model_config = {
        'json_schema_extra': {'example': {'email': 'admin@busbooking.com', 'password': 'P@ssw0rd'}}
    }


class AdminResponse(BaseModel):
    id: UUID
    email: str
    full_name: str
    is_active: bool

    model_config = {
        'from_attributes': True,
        'json_schema_extra': {
            'example': {
                'id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                'email': 'admin@busbooking.com',
                'full_name': 'Ama Mensah',
                'is_active': True,
            }
        },
    }
