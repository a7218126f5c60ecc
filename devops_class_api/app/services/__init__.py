"""
Service layer abstraction.

Services hold the roster logic so that API handlers stay thin.  The
roster lives in memory; a service instance is created per application
and handed to handlers through a dependency.
"""
