"""Domain layer for timekeep application.

Services are imported from their modules (``timekeep.domain.employee`` etc.)
so that the database layer can import entities without a cycle.
"""
