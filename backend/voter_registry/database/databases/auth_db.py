"""
Auth database configuration.
Stores registrants: credentials, role, constituency and approval status.
"""

DB_NAME = "auth_db"


class Collections:
    """Collection names in auth_db."""
    USERS = "users"
    METADATA = "_metadata"


# Manifest for registry
DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "Registrant credentials and signup approval state",
    "collections": [Collections.USERS, Collections.METADATA],
    "access_level": "restricted",
}
