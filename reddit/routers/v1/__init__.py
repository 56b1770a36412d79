"""v1 router package — all /api/v1/* endpoints live here.

Files:
  users.py  — user list, detail, and per-user posts / comments

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to reddit/services/.
"""
