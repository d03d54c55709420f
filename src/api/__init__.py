"""
Package marker for source code under `src.api`.
It groups the FastAPI app, configuration, dependencies, routers, schemas, and services.
"""
