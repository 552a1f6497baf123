# Supabase table: teams
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

teams:
- id: text (primary key) - supplied by the caller
- name: text (not null)
- captain: text (not null)
- members: jsonb / text[] (default: [])
- invites: jsonb / text[] (default: []) - lowercase emails, no duplicates
- created_at: timestamp (set by the gateway on insert)
"""
