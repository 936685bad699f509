from fastapi import Request
from medscribe.managed_backend.client import BackendClient


def get_backend_client(request: Request) -> BackendClient:
    return request.app.state.backend_client
