"""Admin routes over all saved plan records."""

from fastapi import APIRouter, Header, Request

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/records")
async def list_records(
    request: Request,
    x_admin_passphrase: str | None = Header(default=None),
):
    """Every saved record, newest first."""
    state = request.app.state
    state.admin_gate.authorize(passphrase=x_admin_passphrase)
    records = await state.history.list_all()
    return [r.to_dict() for r in records]


@router.delete("/records", status_code=204)
async def clear_records(
    request: Request,
    x_admin_passphrase: str | None = Header(default=None),
):
    """Delete all saved records."""
    state = request.app.state
    state.admin_gate.authorize(passphrase=x_admin_passphrase)
    await state.history.clear_all()
