"""Domain layer for the calorie tracker.

Business rules for health profiles, food logs and accounts, decoupled
from presentation and infrastructure.
"""
