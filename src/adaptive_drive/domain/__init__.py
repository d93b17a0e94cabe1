"""
Domain layer for the AdaptiveDrive application.
"""
