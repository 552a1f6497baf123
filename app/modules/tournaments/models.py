# Supabase tables: tournaments, tournament_registrations
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

tournaments:
- id: uuid (primary key, default: gen_random_uuid())
- name: text (not null)
- max_teams: integer (not null)
- start_date: timestamp (nullable)
- status: text (not null, 'open' on creation)
- winner: text (nullable)
- bracket: jsonb (nullable)
- created_at: timestamp (set by the gateway on insert)

tournament_registrations:
- tournament_id: uuid (references tournaments.id)
- team_id: text (references teams.id)
- no uniqueness enforced by the gateway; deleting a tournament removes its
  registrations first (see TournamentService.delete_tournament)
"""
