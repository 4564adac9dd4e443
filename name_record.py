"""
Decoding of SPL Name Service registry accounts.

Layout (version 1, no tag stored on chain):
    0..32   parent name key
    32..64  owner
    64..96  class
    96..    free-form data
"""
from dataclasses import dataclass
from typing import Any, Optional

from solders.pubkey import Pubkey

from ons_errors import AccountNotFoundError, InvalidRecordError

LAYOUT_VERSION = 1
KEY_LEN = 32
# parent 32 + owner 32 + class 32
HEADER_LEN = 96

_ZERO = Pubkey.default()


@dataclass(frozen=True)
class NameRecord:
    name_key: Pubkey
    parent_name: Pubkey
    owner: Pubkey
    name_class: Pubkey
    data: bytes = b""
    # Pass-through account fields, None when decoded from raw bytes only
    lamports: Optional[int] = None
    rent_epoch: Optional[int] = None
    account_owner: Optional[Pubkey] = None
    executable: Optional[bool] = None

    @property
    def is_parent_unset(self) -> bool:
        return self.parent_name == _ZERO

    @property
    def is_class_unset(self) -> bool:
        return self.name_class == _ZERO


def decode_name_record(name_key: Pubkey, raw: Optional[bytes]) -> NameRecord:
    """Slice raw account data into a NameRecord."""
    if raw is None:
        raise AccountNotFoundError(f"Unable to find the account {name_key}")
    if len(raw) < HEADER_LEN:
        raise InvalidRecordError(
            f"Invalid name account data for {name_key}: "
            f"{len(raw)} bytes, need at least {HEADER_LEN}"
        )

    raw = bytes(raw)
    return NameRecord(
        name_key=name_key,
        parent_name=Pubkey.from_bytes(raw[0:KEY_LEN]),
        owner=Pubkey.from_bytes(raw[KEY_LEN:2 * KEY_LEN]),
        name_class=Pubkey.from_bytes(raw[2 * KEY_LEN:HEADER_LEN]),
        data=raw[HEADER_LEN:],
    )


def parse_name_account_info(name_key: Pubkey, account: Any) -> NameRecord:
    """
    Decode an RPC account (``GetAccountInfoResp.value``) into a NameRecord.

    ``account`` is None when the node has no such account. Lamports, rent
    epoch, owning program and the executable flag are copied unchanged.
    """
    if account is None:
        raise AccountNotFoundError(f"Unable to find the account {name_key}")
    if account.data is None:
        raise InvalidRecordError(f"Invalid name account data for {name_key}: no data")

    record = decode_name_record(name_key, account.data)
    return NameRecord(
        name_key=record.name_key,
        parent_name=record.parent_name,
        owner=record.owner,
        name_class=record.name_class,
        data=record.data,
        lamports=account.lamports,
        rent_epoch=getattr(account, "rent_epoch", None),
        account_owner=account.owner,
        executable=account.executable,
    )
