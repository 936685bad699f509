from medscribe.auth.constants import RESET_REQUESTED_MESSAGE, logger
from medscribe.auth.dependencies import SessionUser
from medscribe.auth.models import ResetPasswordIn
from medscribe.auth.utils import hash_password
from medscribe.common.results import Err, ErrorKind, Ok, Result
from medscribe.managed_backend.client import BackendClient, BackendError
from medscribe.managed_backend.constants import (
    DELETE_ACCOUNT,
    GENERATE_PASSWORD_RESET_TOKEN,
    RESET_PASSWORD_WITH_TOKEN,
)


async def delete_account(client: BackendClient, user: SessionUser) -> Result:
    args = {"userId": user.id}
    if user.role:
        args["role"] = user.role

    try:
        await client.mutation(DELETE_ACCOUNT, args)
    except BackendError as exc:
        logger.error("account.delete.failed", extra={"user_id": user.id, "reason": exc.message})
        return Err(ErrorKind.UNEXPECTED, "Failed to delete account", message=exc.message)

    logger.info("account.delete.success", extra={"user_id": user.id, "role": user.role})
    return Ok({"success": True, "message": "Account deleted successfully"})


async def request_password_reset(client: BackendClient, email: str) -> Result:
    # the answer is the same whether or not the account exists
    try:
        await client.action(GENERATE_PASSWORD_RESET_TOKEN, {"email": email})
        logger.info("password.reset_requested", extra={"email": email})
    except BackendError as exc:
        logger.warning("password.reset_request.failed", extra={"email": email, "reason": exc.message})

    return Ok({"success": True, "message": RESET_REQUESTED_MESSAGE})


async def reset_password(client: BackendClient, payload: ResetPasswordIn) -> Result:
    pwd_hash = hash_password(payload.password)

    try:
        await client.mutation(RESET_PASSWORD_WITH_TOKEN, {"token": payload.token, "newPasswordHash": pwd_hash})
    except BackendError as exc:
        logger.warning("password.reset.rejected", extra={"reason": exc.message})
        return Err(ErrorKind.REJECTED, exc.message or "Failed to reset password")

    logger.info("password.reset.success")
    return Ok({"success": True, "message": "Password has been reset successfully."})
