"""
Ledger Kernel

Domain value types, typed exceptions, and structured logging shared by
the engines and the reporting module:
- Immutable transaction and bank statement records
- Decimal-only monetary amounts
- Machine-readable error codes
"""

__version__ = "0.1.0"
