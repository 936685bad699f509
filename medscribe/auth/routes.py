from fastapi import APIRouter, Depends
from medscribe.auth.constants import logger
from medscribe.auth.dependencies import SessionUser, current_session_user
from medscribe.auth.models import ForgotPasswordIn, ResetPasswordIn
from medscribe.auth.services import delete_account, request_password_reset, reset_password
from medscribe.common.results import to_response
from medscribe.common.validation import validated_body
from medscribe.managed_backend.client import BackendClient
from medscribe.managed_backend.dependencies import get_backend_client

auth_router = APIRouter()


@auth_router.delete("/delete-account")
async def remove_account(user: SessionUser = Depends(current_session_user),
                         client: BackendClient = Depends(get_backend_client)):

    logger.info("account.delete.attempt", extra={"user_id": user.id})
    result = await delete_account(client, user)
    return to_response(result)


@auth_router.post("/forgot-password")
async def forgot_password(payload: ForgotPasswordIn = Depends(validated_body(ForgotPasswordIn)),
                          client: BackendClient = Depends(get_backend_client)):

    logger.info("password.forgot.attempt", extra={"email": payload.email})
    result = await request_password_reset(client, payload.email)
    return to_response(result)


#* backend rejections (unknown or used token) come back as 400, not 500
@auth_router.post("/reset-password")
async def reset(payload: ResetPasswordIn = Depends(validated_body(ResetPasswordIn)),
                client: BackendClient = Depends(get_backend_client)):

    logger.info("password.reset.attempt")
    result = await reset_password(client, payload)
    return to_response(result)
