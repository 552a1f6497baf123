import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from supabase import Client

from app.core.errors import StoreError
from app.modules.teams.schemas import TeamCreate

logger = logging.getLogger(__name__)


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class TeamService:
    def __init__(self, supabase: Client, degrade_list_on_error: bool = True):
        self.supabase = supabase
        self.degrade_list_on_error = degrade_list_on_error

    def list_teams(self) -> List[Dict[str, Any]]:
        """List all teams. Store failures read as an empty list unless degradation is off."""
        try:
            result = self.supabase.table("teams").select("*").execute()
            return result.data or []
        except Exception as e:
            if not self.degrade_list_on_error:
                logger.error(f"Error listing teams: {e}")
                raise StoreError(str(e))
            logger.warning(f"Error listing teams, returning empty list: {e}")
            return []

    def create_team(self, team_data: TeamCreate) -> Optional[Dict[str, Any]]:
        """Insert a team with empty member/invite lists unless provided"""
        row = {
            "id": team_data.id,
            "name": team_data.name,
            "captain": team_data.captain,
            "members": team_data.members or [],
            "invites": team_data.invites if team_data.invites is not None else [],
            "created_at": utc_now_iso(),
        }
        try:
            result = self.supabase.table("teams").insert(row).execute()
        except Exception as e:
            logger.error(f"Error creating team {team_data.id}: {e}")
            raise StoreError(str(e))
        return result.data[0] if result.data else None

    def invite(self, team_id: str, email: str) -> Optional[Dict[str, Any]]:
        """
        Append a normalized email to the team's invites.

        Read-modify-write over two store calls with no transaction: concurrent
        invites to one team can overwrite each other.
        """
        try:
            team_result = self.supabase.table("teams")\
                .select("invites")\
                .eq("id", team_id)\
                .single()\
                .execute()
        except Exception as e:
            logger.error(f"Error fetching invites for team {team_id}: {e}")
            raise StoreError(str(e))

        current = (team_result.data or {}).get("invites")
        invites = list(current) if isinstance(current, list) else []
        existing = {str(i).strip().lower() for i in invites}
        if email not in existing:
            invites.append(email)

        try:
            result = self.supabase.table("teams")\
                .update({"invites": invites})\
                .eq("id", team_id)\
                .execute()
        except Exception as e:
            logger.error(f"Error updating invites for team {team_id}: {e}")
            raise StoreError(str(e))
        return result.data[0] if result.data else None
