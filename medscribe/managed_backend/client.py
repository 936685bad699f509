"""HTTP client for the managed backend (a Convex deployment).

Functions are addressed as ``"module:function"`` and invoked through the
deployment's public HTTP API::

    POST {CONVEX_URL}/api/mutation   {"path": ..., "args": {...}, "format": "json"}

The deployment answers ``{"status": "success", "value": ...}`` or
``{"status": "error", "errorMessage": ...}``. Calls are made once; there is no
retry.
"""
from typing import Any, Dict, Optional

import httpx
import orjson

from medscribe.common.logging_setup import get_logger
from medscribe.config.settings import config_settings

logger = get_logger("medscribe.backend")


class BackendError(Exception):
    """Raised when a remote function fails or cannot be reached."""

    def __init__(self, message: str, *, path: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.status_code = status_code


class BackendClient:
    def __init__(self, base_url: str, *, deploy_key: Optional[str] = None, timeout: float = 10.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        headers = {"Content-Type": "application/json"}
        if deploy_key:
            headers["Authorization"] = f"Convex {deploy_key}"
        self._http = httpx.AsyncClient(base_url=base_url.rstrip("/"), headers=headers,
                                       timeout=timeout, transport=transport)

    async def mutation(self, path: str, args: Dict[str, Any]) -> Any:
        return await self._call("mutation", path, args)

    async def action(self, path: str, args: Dict[str, Any]) -> Any:
        return await self._call("action", path, args)

    async def query(self, path: str, args: Dict[str, Any]) -> Any:
        return await self._call("query", path, args)

    async def _call(self, kind: str, path: str, args: Dict[str, Any]) -> Any:
        logger.debug("backend.call", extra={"kind": kind, "path": path})
        try:
            payload = orjson.dumps({"path": path, "args": args, "format": "json"})
            resp = await self._http.post(f"/api/{kind}", content=payload)
        except httpx.HTTPError as exc:
            logger.warning("backend.call.unreachable", extra={"path": path, "reason": repr(exc)})
            raise BackendError(f"Backend unreachable: {exc}", path=path) from exc

        try:
            body = orjson.loads(resp.content)
        except orjson.JSONDecodeError:
            body = None

        if resp.status_code >= 400 or not isinstance(body, dict) or body.get("status") != "success":
            message = _error_message(body, resp)
            logger.warning("backend.call.failed", extra={"path": path, "status_code": resp.status_code, "reason": message})
            raise BackendError(message, path=path, status_code=resp.status_code)

        return body.get("value")

    async def aclose(self):
        await self._http.aclose()


def _error_message(body: Any, resp: httpx.Response) -> str:
    if isinstance(body, dict):
        msg = body.get("errorMessage") or body.get("message")
        if msg:
            return str(msg)
    text = resp.text.strip()
    return text or f"Backend call failed with status {resp.status_code}"


def create_backend_client() -> BackendClient:
    return BackendClient(
        config_settings.CONVEX_URL,
        deploy_key=config_settings.CONVEX_DEPLOY_KEY,
        timeout=config_settings.BACKEND_TIMEOUT_SECONDS,
    )
