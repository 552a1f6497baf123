from fastapi import APIRouter, Depends, Path
from supabase import Client

from app.config import Settings, get_settings
from app.core.errors import BadRequestError
from app.database.supabase_client import get_supabase
from app.modules.teams.schemas import TeamCreate, TeamInvite
from app.modules.teams.service import TeamService

router = APIRouter(prefix="/teams", tags=["teams"])


def get_team_service(
    supabase: Client = Depends(get_supabase),
    settings: Settings = Depends(get_settings)
) -> TeamService:
    return TeamService(supabase, degrade_list_on_error=settings.degrade_list_on_error)


@router.get("")
def list_teams(service: TeamService = Depends(get_team_service)):
    """List all teams"""
    return service.list_teams()


@router.post("", status_code=201)
def create_team(
    team_data: TeamCreate,
    service: TeamService = Depends(get_team_service)
):
    """Create a team"""
    return {"ok": True, "team": service.create_team(team_data)}


@router.post("/{team_id}/invite")
def invite_to_team(
    invite: TeamInvite,
    team_id: str = Path(...),
    service: TeamService = Depends(get_team_service)
):
    """Add an email to the team's invite list"""
    if not team_id.strip():
        raise BadRequestError("team id is required")
    email = invite.normalized_email()
    if not email:
        raise BadRequestError("email is required")
    return {"ok": True, "team": service.invite(team_id, email)}
