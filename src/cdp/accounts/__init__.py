"""
Accounts - account-level helpers for the CDP platform.
"""
