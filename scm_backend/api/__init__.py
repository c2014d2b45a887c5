"""
API routes module.

FastAPI routers for all HTTP endpoints; the application is assembled in
scm_backend.api.main.
"""
