"""
Application Layer for the Exercise Tracker API.

This package contains:
- ports/: Abstract interfaces (what the use cases need)
- use_cases/: Application services coordinating domain logic and ports
- exceptions: Errors shared by the application and infrastructure layers
"""
