from fastapi import APIRouter, Cookie, Depends, HTTPException, Response
from typing import Optional

from .auth import AuthGate, SESSION_COOKIE
from .database import get_auth_gate
from .inventory_models import SessionUser
from .schemas import LoginRequest, RouteDecision

router = APIRouter(prefix="/api/auth", tags=["auth"])


def session_token(token: Optional[str] = Cookie(default=None, alias=SESSION_COOKIE)) -> Optional[str]:
    return token

def require_session(token: Optional[str] = Depends(session_token),
                    gate: AuthGate = Depends(get_auth_gate)) -> SessionUser:
    """Dependency for every data endpoint: 401 until this client has logged in."""
    session = gate.restore(token)
    if session is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return session

@router.post("/login", response_model=SessionUser)
def login(body: LoginRequest, response: Response, gate: AuthGate = Depends(get_auth_gate)):
    result = gate.login(body.email, body.password)
    if result is None:
        raise HTTPException(status_code=401, detail="Invalid email or password")
    token, session = result
    response.set_cookie(SESSION_COOKIE, token, httponly=True, samesite="lax")
    return session

@router.post("/logout", status_code=204)
def logout(token: Optional[str] = Depends(session_token), gate: AuthGate = Depends(get_auth_gate)):
    gate.logout(token)
    response = Response(status_code=204)
    response.delete_cookie(SESSION_COOKIE)
    return response

@router.get("/session", response_model=SessionUser)
def current_session(session: SessionUser = Depends(require_session)):
    return session

@router.get("/guard", response_model=RouteDecision)
def guard_route(path: str = "/", token: Optional[str] = Depends(session_token),
                gate: AuthGate = Depends(get_auth_gate)):
    """Tell a client where a navigation to ``path`` has to go given its login state."""
    return RouteDecision(path=path, redirect_to=gate.guard(path, token))
