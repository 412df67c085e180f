"""Plan session routes: generate, advance a week, browse history."""

from fastapi import APIRouter, HTTPException, Request

from ...models.user_profile import UserProfile
from ...services.session import GenerationOutcome
from ..session_registry import SessionEntry

router = APIRouter(prefix="/sessions", tags=["sessions"])


def get_entry(request: Request, session_id: str) -> SessionEntry:
    entry = request.app.state.registry.get(session_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return entry


def _outcome_dict(entry: SessionEntry, outcome: GenerationOutcome) -> dict:
    return {
        "state": entry.session.state.to_dict(),
        "recordId": outcome.record.id if outcome.record else None,
        "saved": outcome.saved,
        "saveError": outcome.save_error,
    }


def _busy() -> HTTPException:
    return HTTPException(status_code=409, detail="A plan is already generating for this session")


@router.get("/{session_id}")
async def get_session(request: Request, session_id: str):
    """Current status, plan and profile for a session."""
    return get_entry(request, session_id).to_dict()


@router.delete("/{session_id}", status_code=204)
async def logout(request: Request, session_id: str):
    """End a session."""
    entry = get_entry(request, session_id)
    if entry.busy:
        raise _busy()
    request.app.state.registry.remove(session_id)


@router.post("/{session_id}/plan")
async def submit_profile(request: Request, session_id: str, profile: dict):
    """Generate the week 1 plan for a submitted profile."""
    entry = get_entry(request, session_id)
    try:
        user_profile = UserProfile.from_dict(profile)
    except (KeyError, TypeError, ValueError) as e:
        raise HTTPException(status_code=422, detail=f"Invalid profile: {e}")
    problems = user_profile.validate()
    if problems:
        raise HTTPException(status_code=422, detail=problems)

    if entry.busy:
        raise _busy()
    async with entry.lock:
        outcome = await entry.session.submit_profile(user_profile)
    return _outcome_dict(entry, outcome)


@router.post("/{session_id}/next-week")
async def next_week(request: Request, session_id: str):
    """Generate the following week from the plan on display."""
    entry = get_entry(request, session_id)
    if entry.busy:
        raise _busy()
    async with entry.lock:
        outcome = await entry.session.request_next_week()
    return _outcome_dict(entry, outcome)


@router.get("/{session_id}/history")
async def history(request: Request, session_id: str):
    """The session user's saved plans, newest first."""
    entry = get_entry(request, session_id)
    records = await request.app.state.history.list_by_user(entry.user.id)
    return [
        {
            "id": r.id,
            "timestamp": r.timestamp,
            "weekNumber": r.plan.week_number,
            "planSummary": r.plan_summary,
        }
        for r in records
    ]


@router.post("/{session_id}/history/{record_id}")
async def open_record(request: Request, session_id: str, record_id: str):
    """Display a saved plan without generating or saving anything."""
    entry = get_entry(request, session_id)
    record = await request.app.state.history.get(record_id)
    if record is None or record.user_id != entry.user.id:
        raise HTTPException(status_code=404, detail="Record not found")
    if entry.busy:
        raise _busy()
    state = entry.session.view_history_record(record)
    return {"state": state.to_dict()}
