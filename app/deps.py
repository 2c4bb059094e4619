"""
FastAPI dependency providers. Tests swap these out via ``app.dependency_overrides``.
"""
from __future__ import annotations

from fastapi import Depends

from app.email_utils import SmtpMailer
from app.storage import CloudinaryStorage, ObjectStorage
from core.accounts import AccountManager, CredentialStore, Mailer
from core.config import Settings, get_settings
from core.database import PostgresUserStore
from core.tokens import TokenService


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    return TokenService(settings.jwt_secret)


def get_user_store() -> CredentialStore:
    return PostgresUserStore()


def get_mailer(settings: Settings = Depends(get_settings)) -> Mailer:
    return SmtpMailer(settings)


def get_storage(settings: Settings = Depends(get_settings)) -> ObjectStorage:
    return CloudinaryStorage(settings)


def get_account_manager(
    settings: Settings = Depends(get_settings),
    store: CredentialStore = Depends(get_user_store),
    tokens: TokenService = Depends(get_token_service),
    mailer: Mailer = Depends(get_mailer),
) -> AccountManager:
    return AccountManager(store=store, tokens=tokens, mailer=mailer, frontend_url=settings.frontend_url)
