"""Registration and login routes."""

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from ...models.records import User
from ...services.session import PlanSession

router = APIRouter(prefix="/accounts", tags=["accounts"])


class RegisterBody(BaseModel):
    name: str
    email: str
    password: str


class LoginBody(BaseModel):
    email: str
    password: str


def _open_session(request: Request, user: User) -> dict:
    state = request.app.state
    session = PlanSession(generator=state.generator, history=state.history, user_id=user.id)
    entry = state.registry.create(user, session)
    return {"user": user.public_dict(), "sessionId": entry.id}


@router.post("/register", status_code=201)
async def register(request: Request, body: RegisterBody):
    """Create an account and open a session for it."""
    try:
        user = await request.app.state.accounts.register(body.name, body.email, body.password)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _open_session(request, user)


@router.post("/login")
async def login(request: Request, body: LoginBody):
    """Authenticate and open a plan session.

    The email ``admin`` with the admin passphrase grants the admin view
    instead of a session.
    """
    accounts = request.app.state.accounts
    if accounts.is_admin_login(body.email, body.password):
        return {"admin": True}
    user = await accounts.login(body.email, body.password)
    return _open_session(request, user)
