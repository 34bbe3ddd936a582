"""Vote ledger codec.

A ledger is stored on the target user's row as an opaque JSON string:

    [{"VotedNickname": "alice", "VotedRating": 1, "VotedDate": "..."}]

``decode_ledger(encode_ledger(records)) == records`` holds for every valid
ledger, the empty one included.
"""

from typing import Sequence

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from peerrate.domain.error import CorruptLedgerError, LedgerEncodingError
from peerrate.domain.model import VoteRecord

_ledger_adapter = TypeAdapter(list[VoteRecord])

# Stored values meaning "nobody has voted yet"
_EMPTY_LEDGERS = frozenset({"", "null"})


def encode_ledger(records: Sequence[VoteRecord]) -> str:
    """Serialize a ledger to its stored form.

    Raises:
        LedgerEncodingError: If a record cannot be serialized
    """
    try:
        return _ledger_adapter.dump_json(list(records), by_alias=True).decode()
    except PydanticSerializationError as e:
        raise LedgerEncodingError(str(e)) from e


def decode_ledger(raw: str | None) -> list[VoteRecord]:
    """Parse a stored ledger.

    Raises:
        CorruptLedgerError: If the value is not a well-formed ledger or
            holds more than one record for the same voter
    """
    if raw is None or raw.strip() in _EMPTY_LEDGERS:
        return []

    try:
        records = _ledger_adapter.validate_json(raw)
    except PydanticValidationError as e:
        raise CorruptLedgerError(f"{e.error_count()} invalid entries") from e

    seen: set[str] = set()
    for record in records:
        if record.voter.root in seen:
            raise CorruptLedgerError(f"duplicate vote from {record.voter}")
        seen.add(record.voter.root)

    return records
