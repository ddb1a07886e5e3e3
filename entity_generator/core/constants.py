"""Fixed naming and type-mapping constants for entity generation."""

# Generated class and path naming
CLASS_NAME_PREFIX = "CTab_"
NAMESPACE_ROOT = "Entity_Model.Entity"
ENTITY_BASE_PATH = "NET_Core_API/Entity_Model/Entity"
CONTEXT_FILE_NAME = "CEntityContext.cs"
SOURCE_EXTENSION = ".cs"

# Worksheet layout: one header row, nine positional columns
HEADER_ROWS = 1
FIELD_COLUMN_COUNT = 9
FLAG_TRUE = "1"

# Foreign key name prefixes recognised on detail tables
FOREIGN_KEY_PREFIXES = ("FK_", "Fk_", "CFK_")

# Primary key prefix stripped when deriving the entity prefix
PRIMARY_KEY_PREFIX = "PK_"
UNKNOWN_PREFIX = "Unknown"

# Target language types
TYPE_LONG = "long"
TYPE_INT = "int"
TYPE_DECIMAL = "decimal"
TYPE_BOOL = "bool"
TYPE_GUID = "Guid"
TYPE_STRING = "string"

# Symbolic storage descriptors provided by the target project
TABLE_ID = "PropertyConfig.TableID"
TABLE_CODE = "PropertyConfig.TableCode"
TABLE_TIME = "PropertyConfig.TableTime"
TABLE_IP = "PropertyConfig.TableIP"

# Storage descriptor defaults
DEFAULT_STRING_LENGTH = "50"
DEFAULT_DECIMAL_PRECISION = "18"
DEFAULT_DECIMAL_SCALE = "2"
STATUS_CODE_TYPE = "nvarchar(1)"
STATUS_CODE_DESCRIPTOR = "character(1)"

# Audit column suffixes mapped to (target type, storage descriptor)
CREATOR_SUFFIXES: dict[str, tuple[str, str]] = {
    "_CreateId": (TYPE_LONG, TABLE_ID),
    "_CreateCode": (TYPE_STRING, TABLE_CODE),
    "_CreateDate": (TYPE_LONG, TABLE_TIME),
    "_CreateIp": (TYPE_STRING, TABLE_IP),
}
EDITOR_SUFFIXES: dict[str, tuple[str, str]] = {
    "_EditId": (TYPE_LONG, TABLE_ID),
    "_EditCode": (TYPE_STRING, TABLE_CODE),
    "_EditDate": (TYPE_LONG, TABLE_TIME),
    "_EditIp": (TYPE_STRING, TABLE_IP),
}
