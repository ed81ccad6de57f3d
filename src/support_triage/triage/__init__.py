"""
Triage Module
=============

Bounded context for keyword triage of support messages.

Responsibilities:
- Classify messages into high, medium or low priority by keyword matching
- Score urgency from the deciding tier and its match count
- Format the reply, visual indicator and suggested actions for the sender
"""

__version__ = "1.0.0"
