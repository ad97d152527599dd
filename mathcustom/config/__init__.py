"""
Configuration loading and validation for settings and logging.

Provides strongly typed settings objects read from environment variables,
with upfront validation.
"""
