from fastapi import Request
from medscribe.notifications.mailer import Mailer


def get_mailer(request: Request) -> Mailer:
    return request.app.state.mailer
