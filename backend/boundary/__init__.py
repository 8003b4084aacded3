"""
Boundary layer for external system integrations.

Handles all interactions with external systems (LLM vendors, the
filesystem document store). Provides adapters the core consumes through
narrow interfaces.
"""
