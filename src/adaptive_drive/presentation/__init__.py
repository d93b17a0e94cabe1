"""
Presentation layer for the AdaptiveDrive application.
"""
