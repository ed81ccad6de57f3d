"""
Triage Infrastructure Layer
============================

Adapters implementing the application layer interfaces.
"""

from support_triage.triage.infrastructure.clock import SystemClock

__all__ = ["SystemClock"]
