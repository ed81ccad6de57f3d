"""
Support Triage
==============

Keyword-based triage of free-text support messages: classify a message into
a priority tier, then render a formatted response for the messaging
integration that posted it.
"""

__version__ = "1.0.0"
