"""
Triage Interfaces Layer
========================

Interface adapters (controllers) for message triage.

Contains:
- Controllers: FastAPI route handlers
"""

from support_triage.triage.interfaces.controllers import triage_router

__all__ = ["triage_router"]
