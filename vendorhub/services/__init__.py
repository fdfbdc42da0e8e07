"""Services package - all business logic lives here, never in routers.

Files:
  vendor.py  - add / update / list handlers
  images.py  - base64 PNG persistence to the upload directory
  token.py   - token validation collaborator and its default implementation

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers.
"""
