"""API schemas for request/response serialization.

Provides Pydantic models for error envelopes and JSON badge responses.
"""
