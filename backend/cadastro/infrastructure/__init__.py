"""Infrastructure Layer — database engine and cross-cutting concerns.

Invariants:
    - Infrastructure never imports core/ rule logic, only core/errors
    - All driver exceptions mapped to StorageError before leaving this layer
"""
