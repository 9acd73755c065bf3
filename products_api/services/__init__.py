"""Services package — all business logic lives here, never in routers.

Files:
  product.py  — listing engine (filters + pagination) and product CRUD

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
