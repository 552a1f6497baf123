import logging
from typing import Any, Dict, List, Optional

from postgrest.exceptions import APIError
from supabase import Client

from app.core.errors import BadRequestError, NotFoundError, PartialFailureError, StoreError
from app.modules.teams.service import utc_now_iso
from app.modules.tournaments.schemas import TournamentCreate, TournamentUpdate

logger = logging.getLogger(__name__)


class TournamentService:
    def __init__(self, supabase: Client, degrade_list_on_error: bool = True):
        self.supabase = supabase
        self.degrade_list_on_error = degrade_list_on_error

    def list_tournaments(self) -> List[Dict[str, Any]]:
        """List all tournaments. An empty table and a failed read look the same to the caller."""
        try:
            result = self.supabase.table("tournaments").select("*").execute()
            return result.data or []
        except Exception as e:
            if not self.degrade_list_on_error:
                logger.error(f"Error listing tournaments: {e}")
                raise StoreError(str(e))
            logger.warning(f"Error listing tournaments, returning empty list: {e}")
            return []

    def create_tournament(self, tournament_data: TournamentCreate) -> Optional[Dict[str, Any]]:
        row = {
            "name": tournament_data.name,
            "max_teams": tournament_data.max_teams,
            "start_date": tournament_data.start_date or None,
            "status": "open",
            "created_at": utc_now_iso(),
        }
        try:
            result = self.supabase.table("tournaments").insert(row).execute()
        except Exception as e:
            logger.error(f"Error creating tournament: {e}")
            raise StoreError(str(e))
        return result.data[0] if result.data else None

    def get_tournament(self, tournament_id: str) -> Dict[str, Any]:
        try:
            result = self.supabase.table("tournaments")\
                .select("*")\
                .eq("id", tournament_id)\
                .single()\
                .execute()
        except APIError as e:
            # single() reports "no rows" as an API error
            logger.info(f"Tournament {tournament_id} not found: {e}")
            raise NotFoundError("Tournament not found")
        except Exception as e:
            logger.error(f"Error fetching tournament {tournament_id}: {e}")
            raise StoreError(str(e))

        if not result.data:
            raise NotFoundError("Tournament not found")
        return result.data

    def update_tournament(self, tournament_id: str, tournament_data: TournamentUpdate) -> None:
        """Apply a partial update; only fields present in the request are written"""
        update_data = tournament_data.to_updates()
        if not update_data:
            raise BadRequestError("No updatable fields provided")
        try:
            self.supabase.table("tournaments")\
                .update(update_data)\
                .eq("id", tournament_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error updating tournament {tournament_id}: {e}")
            raise StoreError(str(e))

    def delete_tournament(self, tournament_id: str) -> None:
        """
        Delete a tournament and its registrations.

        Two store calls without a transaction. If the second one fails the
        registrations stay deleted and PartialFailureError is raised.
        """
        try:
            self.supabase.table("tournament_registrations")\
                .delete()\
                .eq("tournament_id", tournament_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error deleting registrations for tournament {tournament_id}: {e}")
            raise StoreError(str(e))

        try:
            self.supabase.table("tournaments")\
                .delete()\
                .eq("id", tournament_id)\
                .execute()
        except Exception as e:
            logger.error(
                f"Registrations for tournament {tournament_id} were deleted "
                f"but the tournament row was not: {e}"
            )
            raise PartialFailureError(str(e))
