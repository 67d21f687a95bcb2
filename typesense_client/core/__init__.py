"""Core module for configuration, exceptions, and shared utilities.

Patterns applied:
- Pydantic Settings with SettingsConfigDict
- Custom namespaced exceptions (no builtin shadowing)
- One-time structlog configuration
"""
