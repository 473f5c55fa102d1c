"""Game domain services: sessions, answer submission, question metadata, scoring.

HTTP views and CLI commands import from here, keeping transport concerns
separated from the game rules.
"""
