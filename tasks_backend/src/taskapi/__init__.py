"""
FastAPI Tasks Backend package.

The ASGI application lives in taskapi.main (taskapi.main:app); run the
server with `python -m taskapi`.
"""
