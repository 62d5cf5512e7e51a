"""
Application Layer for the PulseFlow planner.

This package contains:
- ports/: Abstract storage interfaces (what the engine needs)
- services/: Application services owning and persisting the Schedule
- exceptions.py: Errors shared with backend and infrastructure layers
"""
