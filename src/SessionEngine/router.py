from fastapi import APIRouter, HTTPException, Depends, Response
from typing import Optional, Union
from pydantic import BaseModel

from .service import SessionRegistry, StakeSession, get_session_registry
from .models import StakeSummary

router = APIRouter(prefix="/sessions", tags=["Sessions"])

def get_registry():
    return get_session_registry()

class InputRequest(BaseModel):
    value: Union[float, str, None] = None

class SessionCreated(BaseModel):
    session_id: str
    summary: StakeSummary

class InputResponse(BaseModel):
    accepted: bool
    error: Optional[str] = None
    summary: StakeSummary

def _lookup(session_id: str, registry: SessionRegistry) -> StakeSession:
    session = registry.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
    return session

@router.post("", response_model=SessionCreated, status_code=201)
def create_session(registry: SessionRegistry = Depends(get_registry)):
    session_id = registry.create()
    return SessionCreated(session_id=session_id, summary=registry.get(session_id).get_summary())

@router.get("/{session_id}", response_model=StakeSummary)
def get_summary(session_id: str, registry: SessionRegistry = Depends(get_registry)):
    return _lookup(session_id, registry).get_summary()

# A bound violation is a normal answer, not an HTTP error
@router.put("/{session_id}/multiplier-a", response_model=InputResponse)
def set_multiplier_a(session_id: str, body: InputRequest, registry: SessionRegistry = Depends(get_registry)):
    session = _lookup(session_id, registry)
    result = session.set_multiplier_a(body.value)
    return InputResponse(accepted=result.accepted, error=result.error, summary=session.get_summary())

@router.put("/{session_id}/multiplier-b", response_model=InputResponse)
def set_multiplier_b(session_id: str, body: InputRequest, registry: SessionRegistry = Depends(get_registry)):
    session = _lookup(session_id, registry)
    result = session.set_multiplier_b(body.value)
    return InputResponse(accepted=result.accepted, error=result.error, summary=session.get_summary())

@router.put("/{session_id}/target-stake", response_model=InputResponse)
def set_target_stake(session_id: str, body: InputRequest, registry: SessionRegistry = Depends(get_registry)):
    session = _lookup(session_id, registry)
    result = session.set_target_stake(body.value)
    return InputResponse(accepted=result.accepted, error=result.error, summary=session.get_summary())

@router.post("/{session_id}/reset", response_model=StakeSummary)
def reset_session(session_id: str, registry: SessionRegistry = Depends(get_registry)):
    session = _lookup(session_id, registry)
    session.reset()
    return session.get_summary()

@router.delete("/{session_id}", status_code=204)
def delete_session(session_id: str, registry: SessionRegistry = Depends(get_registry)):
    if not registry.remove(session_id):
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
    return Response(status_code=204)
