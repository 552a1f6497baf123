import logging

from supabase import Client

from app.core.errors import StoreError

logger = logging.getLogger(__name__)


class RegistrationService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def register_team(self, tournament_id: str, team_id: str) -> None:
        """Insert a tournament/team pair. Duplicates are left to the table's constraints."""
        try:
            self.supabase.table("tournament_registrations").insert({
                "tournament_id": tournament_id,
                "team_id": team_id
            }).execute()
        except Exception as e:
            logger.error(f"Error registering team {team_id} to tournament {tournament_id}: {e}")
            raise StoreError(str(e))

    def unregister_team(self, tournament_id: str, team_id: str) -> None:
        """Remove a tournament/team pair; removing a missing pair is not an error"""
        try:
            self.supabase.table("tournament_registrations")\
                .delete()\
                .match({"tournament_id": tournament_id, "team_id": team_id})\
                .execute()
        except Exception as e:
            logger.error(f"Error unregistering team {team_id} from tournament {tournament_id}: {e}")
            raise StoreError(str(e))
