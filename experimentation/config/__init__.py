"""
Configuration Management
=======================

Environment-based configuration using Pydantic Settings.

Components:
- settings: Frontend endpoint, polling and environment configuration
- logging: Structured logging configuration
"""
