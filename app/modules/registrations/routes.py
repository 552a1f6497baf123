from fastapi import APIRouter, Depends, Path
from supabase import Client

from app.core.errors import BadRequestError
from app.database.supabase_client import get_supabase
from app.modules.registrations.schemas import RegistrationCreate
from app.modules.registrations.service import RegistrationService

router = APIRouter(prefix="/tournaments/{tournament_id}/register", tags=["registrations"])


def get_registration_service(supabase: Client = Depends(get_supabase)) -> RegistrationService:
    return RegistrationService(supabase)


@router.post("", status_code=201)
def register_team(
    registration: RegistrationCreate,
    tournament_id: str = Path(...),
    service: RegistrationService = Depends(get_registration_service)
):
    """Register a team to a tournament"""
    if not tournament_id.strip() or not registration.team_id:
        raise BadRequestError("tournament id and teamId are required")
    service.register_team(tournament_id, registration.team_id)
    return {"ok": True}


@router.delete("/{team_id}")
def unregister_team(
    tournament_id: str = Path(...),
    team_id: str = Path(...),
    service: RegistrationService = Depends(get_registration_service)
):
    """Remove a team from a tournament"""
    if not tournament_id.strip() or not team_id.strip():
        raise BadRequestError("tournament id and team id are required")
    service.unregister_team(tournament_id, team_id)
    return {"ok": True}
