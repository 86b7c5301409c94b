"""
Data Models
===========

Pydantic models for ContinuITy frontend payloads and experiment reports.
"""
