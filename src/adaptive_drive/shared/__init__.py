"""
Shared utilities and infrastructure for the AdaptiveDrive application.

This module contains configuration management and exception handling
that are used across all layers of the application.
"""
