"""Study session endpoints"""
from fastapi import APIRouter, Depends, HTTPException

from mindsync.api.deps import get_repositories
from mindsync.infra.supabase.repositories import RepositoryFactory
from mindsync.models.session import StudySession, StudySessionCreate, StudySessionUpdate

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.post("", response_model=StudySession)
async def create_session(request: StudySessionCreate, repos: RepositoryFactory = Depends(get_repositories)):
    return await repos.sessions.create(request)


@router.put("/{session_id}", response_model=StudySession)
async def update_session(
    session_id: str,
    user_id: str,
    request: StudySessionUpdate,
    repos: RepositoryFactory = Depends(get_repositories),
):
    session = await repos.sessions.update(session_id, request, user_id=user_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session
