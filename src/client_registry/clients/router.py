"""FastAPI router for client registration."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from client_registry.clients.errors import ClientSecretError
from client_registry.clients.models import (
    ClientRegistrationRequest,
    RegistrationError,
    RegistrationResult,
)
from client_registry.clients.service import (
    ClientRegistrationService,
    get_client_registration_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Client Registration"])


@router.post(
    "/clients",
    response_model=RegistrationResult,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": RegistrationError, "description": "Invalid client secret settings"},
    },
)
async def create_client(
    registration_request: ClientRegistrationRequest,
    service: Annotated[ClientRegistrationService, Depends(get_client_registration_service)],
) -> JSONResponse:
    """Build a client descriptor.

    The client secret is validated, hashed from the password if one is given,
    and protected with the configured protector. The descriptor is returned
    for the caller to store; nothing is persisted here.

    Args:
        registration_request: Client settings.
        service: Client registration service.

    Returns:
        The descriptor and any warnings, or an error body.
    """
    try:
        result = service.create_client(registration_request)
    except ClientSecretError as e:
        logger.warning(
            "Client registration failed: %s - %s",
            e.code.value,
            e,
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=e.to_response().model_dump(mode="json", exclude_none=True),
        )

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=result.model_dump(mode="json"),
    )
