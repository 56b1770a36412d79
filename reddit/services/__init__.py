"""Services package — business logic lives here, never in routers.

Files:
  user.py  — UserService (list / get users)

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
