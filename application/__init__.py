"""
Application Layer for the Training Progression API.

This package contains:
- ports/: Abstract repository interfaces (what the engines need)
- use_cases/: Orchestration of fetch, compute and persist steps
- exceptions.py: Errors surfaced to the API layer
"""
