"""Well-known names and versions shared across the package."""

# Identifier of the metadata standard itself, as listed in `standards`
METADATA_STANDARD = "nep330"
METADATA_STANDARD_VERSION = "1.1.0"

# Name of the read-only query exposed by the host contract
QUERY_METHOD = "contract_source_metadata"

# Reserved name hashed into the fixed storage slot holding the record
METADATA_SLOT_NAME = "contract_source_metadata.record"

# Public view keys
VIEW_FIELDS = ("version", "link", "standards")
