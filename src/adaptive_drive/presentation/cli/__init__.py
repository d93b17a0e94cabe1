"""
Command line interface for AdaptiveDrive.
"""

from .cli_interface import CLIInterface, parse_context_spec

__all__ = ['CLIInterface', 'parse_context_spec']
