"""
Voters database configuration.

Structure:
- user_<encoded username>_collection: one partition of voter records per
  accepted registrant, created at runtime by the partition service
- _partitions: registry of provisioned partitions, keyed by username
- _metadata: Database metadata
"""

DB_NAME = "voters_db"


class Collections:
    """Static collection names in voters_db."""
    PARTITIONS = "_partitions"
    METADATA = "_metadata"


PARTITION_PREFIX = "user_"
PARTITION_SUFFIX = "_collection"


# Manifest for registry
DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "Per-registrant voter record partitions",
    "collections": [Collections.PARTITIONS, Collections.METADATA],
    "access_level": "standard",
}
