"""
High-level use cases for the GTTC records package.

records_service owns the two collections and their persistence; the other
modules orchestrate it for admissions, payments, expenses and backups.
Callers (forms, tables) should go through these services instead of touching
the slot storage directly.
"""
