"""
Training Events API package.

The ``app`` subpackage contains the FastAPI application that manages
training events, their participant rosters and per-session attendance.
"""
