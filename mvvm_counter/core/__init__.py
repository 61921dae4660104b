"""
Core module - Cross-cutting concerns for MVVM Counter.

Contains:
- di/: Dependency injection container
- config/: Application configuration
- exceptions/: Custom exceptions
"""
