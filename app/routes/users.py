import logging

from fastapi import APIRouter, Depends

from app.deps import get_account_manager
from app.schemas import (
    ForgotPasswordData,
    LoginData,
    LoginResponse,
    MessageResponse,
    RegisterData,
    ResetPasswordData,
)
from core.accounts import AccountManager

log = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/register", response_model=MessageResponse)
def register(data: RegisterData, accounts: AccountManager = Depends(get_account_manager)):
    log.info("Register requested for %s", data.email)
    accounts.register(data.username, data.email, data.password)
    return {"message": "Verification email sent! Please check your inbox."}


@router.get("/verify", response_model=MessageResponse)
def verify(token: str = "", accounts: AccountManager = Depends(get_account_manager)):
    accounts.verify(token)
    return {"message": "User verified and saved successfully!"}


@router.post("/login", response_model=LoginResponse)
def login(data: LoginData, accounts: AccountManager = Depends(get_account_manager)):
    token = accounts.login(data.email, data.password)
    return {"message": "Login successful", "token": token}


@router.post("/forgot-password", response_model=MessageResponse)
def forgot_password(data: ForgotPasswordData, accounts: AccountManager = Depends(get_account_manager)):
    accounts.forgot_password(data.email)
    return {"message": "Password reset link has been sent to your email"}


@router.post("/reset-password/{token}", response_model=MessageResponse)
def reset_password(
    token: str,
    data: ResetPasswordData,
    accounts: AccountManager = Depends(get_account_manager),
):
    accounts.reset_password(token, data.password)
    return {"message": "Password has been reset successfully!"}
