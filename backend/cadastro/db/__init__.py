"""Database Metadata — declarative Base shared by models, migrations and tests.

Invariants:
    - Single async engine per process (initialized via init_db)
"""
