"""
Package marker for source code under `src`.
It groups the justification core, the access layer, and the FastAPI service under one import path.
"""
