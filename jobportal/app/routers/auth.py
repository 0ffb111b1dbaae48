from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from typing import Optional

from ..models.auth import Credentials, SessionInfo, SessionUser, TokenResponse
from ..dependencies import get_auth_service, get_current_session, get_optional_session

from jobportal.core.exceptions import AuthError
from jobportal.core.session import AuthService, UserSession

router = APIRouter()


def _sign_in(auth: AuthService, email: str, password: str) -> TokenResponse:
    try:
        payload = auth.sign_in(email, password)
    except AuthError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Sign-in failed: {e.message}",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return TokenResponse(**payload)


@router.post("/sign-in", response_model=TokenResponse)
def sign_in(credentials: Credentials, auth: AuthService = Depends(get_auth_service)):
    """Sign in with email and password"""
    return _sign_in(auth, credentials.email, credentials.password)


@router.post("/token", response_model=TokenResponse)
def token(
    form: OAuth2PasswordRequestForm = Depends(),
    auth: AuthService = Depends(get_auth_service)
):
    """OAuth2 password flow; the username is the email address"""
    return _sign_in(auth, form.username, form.password)


@router.post("/sign-up", status_code=status.HTTP_201_CREATED)
def sign_up(credentials: Credentials, auth: AuthService = Depends(get_auth_service)):
    """Register a new account"""
    try:
        user = auth.sign_up(credentials.email, credentials.password)
    except AuthError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Sign-up failed: {e.message}"
        )
    return {"user": user}


@router.post("/sign-out", status_code=status.HTTP_204_NO_CONTENT)
def sign_out(
    session: UserSession = Depends(get_current_session),
    auth: AuthService = Depends(get_auth_service)
):
    """Revoke the current access token"""
    try:
        auth.sign_out(session)
    except AuthError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Sign-out failed: {e.message}"
        )


@router.get("/session", response_model=SessionInfo)
def current_session(session: Optional[UserSession] = Depends(get_optional_session)):
    """Who is signed in, if anyone"""
    if session is None:
        return SessionInfo(authenticated=False)
    return SessionInfo(
        authenticated=True,
        user=SessionUser(id=session.user_id, email=session.email)
    )
