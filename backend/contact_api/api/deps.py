"""
Service dependencies.

Services are built once in the application lifespan and kept on
`app.state`; these accessors hand them to the endpoints.
"""
from fastapi import Request

from contact_api.services.contact_service import ContactService
from contact_api.services.message_service import MessageService
from contact_api.services.auth_service import AuthService


def get_contact_service(request: Request) -> ContactService:
    return request.app.state.contact_service


def get_message_service(request: Request) -> MessageService:
    return request.app.state.message_service


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service
