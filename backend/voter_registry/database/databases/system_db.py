"""
System database configuration.
Keeps one db_registry entry per application database (see registry.py).
"""

DB_NAME = "system_db"


class Collections:
    """Collection names in system_db."""
    DB_REGISTRY = "db_registry"
    METADATA = "_metadata"


DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "Registry of the voter registry's databases",
    "collections": [Collections.DB_REGISTRY, Collections.METADATA],
    "access_level": "system",
}
