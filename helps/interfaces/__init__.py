"""
Interfaces layer package.

Contains the FastAPI route handlers. No business logic belongs here.
"""
