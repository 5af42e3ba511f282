from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from contact_api.api.deps import get_auth_service
from contact_api.schemas.auth import LoginRequest, LoginResponse
from contact_api.services.auth_service import AuthService
from contact_api.services.exceptions import (
    MissingFieldError,
    InvalidCredentialsError,
    StoreUnavailableError,
)

router = APIRouter(prefix="/contact", tags=["Authentication"])


@router.post("/login", response_model=LoginResponse)
async def login(
    request: Optional[LoginRequest] = None,
    service: AuthService = Depends(get_auth_service),
):
    request = request or LoginRequest()
    try:
        role = await service.verify_credentials(request.username, request.password)
    except MissingFieldError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except StoreUnavailableError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return LoginResponse(role=role)
