"""Output sinks for rendering and exporting ledger data."""

from bank_ledger.sinks.console import ConsoleSink
from bank_ledger.sinks.serialization import account_to_dict, serialize_value, to_dict

__all__ = ["ConsoleSink", "account_to_dict", "serialize_value", "to_dict"]
