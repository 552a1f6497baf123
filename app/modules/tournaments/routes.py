from fastapi import APIRouter, Depends, Path
from supabase import Client

from app.config import Settings, get_settings
from app.core.errors import BadRequestError
from app.database.supabase_client import get_supabase
from app.modules.tournaments.schemas import TournamentCreate, TournamentUpdate
from app.modules.tournaments.service import TournamentService

router = APIRouter(prefix="/tournaments", tags=["tournaments"])


def get_tournament_service(
    supabase: Client = Depends(get_supabase),
    settings: Settings = Depends(get_settings)
) -> TournamentService:
    return TournamentService(supabase, degrade_list_on_error=settings.degrade_list_on_error)


def require_id(value: str) -> str:
    if not value.strip():
        raise BadRequestError("tournament id is required")
    return value


@router.get("")
def list_tournaments(service: TournamentService = Depends(get_tournament_service)):
    """List all tournaments"""
    return service.list_tournaments()


@router.post("", status_code=201)
def create_tournament(
    tournament_data: TournamentCreate,
    service: TournamentService = Depends(get_tournament_service)
):
    """Create a tournament in the open state"""
    return {"ok": True, "tournament": service.create_tournament(tournament_data)}


@router.get("/{tournament_id}")
def get_tournament(
    tournament_id: str = Path(...),
    service: TournamentService = Depends(get_tournament_service)
):
    """Get tournament by ID (returned as stored, without an envelope)"""
    return service.get_tournament(require_id(tournament_id))


@router.patch("/{tournament_id}")
def update_tournament(
    tournament_data: TournamentUpdate,
    tournament_id: str = Path(...),
    service: TournamentService = Depends(get_tournament_service)
):
    """Update name, maxTeams, startDate, status, winner or bracket"""
    service.update_tournament(require_id(tournament_id), tournament_data)
    return {"ok": True}


@router.delete("/{tournament_id}")
def delete_tournament(
    tournament_id: str = Path(...),
    service: TournamentService = Depends(get_tournament_service)
):
    """Delete a tournament along with its registrations"""
    service.delete_tournament(require_id(tournament_id))
    return {"ok": True}
