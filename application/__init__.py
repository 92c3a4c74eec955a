"""
Application Layer for the workout composition core.

This package contains:
- ports/: Abstract interfaces (workout persistence, exercise catalog)
- use_cases/: Workflows that authorize, mutate and persist workouts
- exceptions: Errors raised by repository adapters
"""
