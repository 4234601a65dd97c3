"""
Application Layer for the Hevy Insights API.

This package contains:
- ports/: Abstract gateway interfaces (what the services need)
- exceptions.py: Errors shared by the application and infrastructure layers
"""
