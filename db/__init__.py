"""
__init__.py — Package Initialization File
-----------------------------------------

Marks the `db` directory as a Python package holding the SQLAlchemy engine,
session factory, and the ORM models for reports and user profiles.

Importing `db.report_model` and `db.user_model` registers their tables on
the shared `Base`, so `init_db()` can create them in one call.
"""
