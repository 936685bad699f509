from fastapi import Request
from medscribe.common.utils import SystemClock


def get_clock(request: Request) -> SystemClock:
    return request.app.state.clock
