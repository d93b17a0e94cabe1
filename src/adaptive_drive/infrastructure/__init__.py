"""
Infrastructure layer for the AdaptiveDrive application.
"""
