"""
Typed Exception Hierarchy for the Ledger Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Callers of the reporting core must be able to tell a malformed import row
from a duplicated bank statement line without parsing message strings.
Every error therefore:
  1. Has its own exception CLASS (catch by type, not message)
  2. Carries a CODE class attribute (machine-readable, API-safe)
  3. Stores its context as ATTRIBUTES (not just a message string)

Example:
    try:
        service.reconcile(transactions, statement_lines)
    except DuplicateStatementIdError as e:
        api_response(code=e.code, ids=e.duplicate_ids)

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    LedgerError (base)
    |
    +-- IngestionError
    |   +-- InvalidRecordError
    |
    +-- ClassificationError
    |   +-- CategoryConflictError
    |
    +-- ReconciliationError
    |   +-- DuplicateStatementIdError
    |
    +-- ConfigurationError
        +-- InvalidConfigurationError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                     | When Raised
----------------|--------------------------|---------------------------------------
Ingestion       | INVALID_RECORD           | Raw row has unknown enum / bad date
----------------|--------------------------|---------------------------------------
Classification  | CATEGORY_CONFLICT        | One account name, two categories
                |                          | (strict mode only)
----------------|--------------------------|---------------------------------------
Reconciliation  | DUPLICATE_STATEMENT_ID   | Statement ids are not unique
----------------|--------------------------|---------------------------------------
Configuration   | INVALID_CONFIGURATION    | Setting outside its allowed range
===============================================================================
"""


class LedgerError(Exception):
    """
    Base exception for all ledger errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "LEDGER_ERROR"


# Ingestion exceptions


class IngestionError(LedgerError):
    """Base exception for raw-record coercion errors."""

    code: str = "INGESTION_ERROR"


class InvalidRecordError(IngestionError):
    """A raw record field could not be coerced to its domain type."""

    code: str = "INVALID_RECORD"

    def __init__(self, field: str, value: object, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value for {field!r}: {value!r} ({reason})")


# Classification exceptions


class ClassificationError(LedgerError):
    """Base exception for account classification errors."""

    code: str = "CLASSIFICATION_ERROR"


class CategoryConflictError(ClassificationError):
    """The same account name was posted under two different categories."""

    code: str = "CATEGORY_CONFLICT"

    def __init__(
        self,
        account_name: str,
        first_category: str,
        conflicting_category: str,
    ):
        self.account_name = account_name
        self.first_category = first_category
        self.conflicting_category = conflicting_category
        super().__init__(
            f"Account {account_name!r} first seen as {first_category}, "
            f"later posted as {conflicting_category}"
        )


# Reconciliation exceptions


class ReconciliationError(LedgerError):
    """Base exception for bank reconciliation errors."""

    code: str = "RECONCILIATION_ERROR"


class DuplicateStatementIdError(ReconciliationError):
    """Bank statement lines must have unique ids before matching."""

    code: str = "DUPLICATE_STATEMENT_ID"

    def __init__(self, duplicate_ids: list[str]):
        self.duplicate_ids = duplicate_ids
        super().__init__(
            f"Duplicate bank statement ids: {', '.join(duplicate_ids)}"
        )


# Configuration exceptions


class ConfigurationError(LedgerError):
    """Base exception for configuration errors."""

    code: str = "CONFIGURATION_ERROR"


class InvalidConfigurationError(ConfigurationError):
    """A configuration value is outside its allowed range."""

    code: str = "INVALID_CONFIGURATION"

    def __init__(self, setting: str, value: object, reason: str):
        self.setting = setting
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {setting}={value!r}: {reason}")
