"""v1 router package - all /api/v1/* endpoints live here.

Files:
  vendors.py  - add, update and list vendors

Rule: Routers only handle HTTP (request parsing, response rendering).
      All business logic delegates to vendorhub/services/.
"""
