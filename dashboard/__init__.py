"""Schedule Tracker web dashboard."""
