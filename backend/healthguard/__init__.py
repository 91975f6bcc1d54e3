"""
HealthGuard
Patient-facing health tracking backend: vitals, daily habits, medical
reports, heuristic risk scoring, disease impact insights and a scripted
health assistant.
"""

__version__ = "1.0.0"
