import os
import sys
from unittest.mock import MagicMock

import pytest

# Add project root to sys.path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from solders.pubkey import Pubkey

from name_record import HEADER_LEN, NameRecord, decode_name_record, parse_name_account_info
from ons_errors import AccountNotFoundError, InvalidRecordError

NAME_KEY = Pubkey(bytes([9] * 32))
PARENT = bytes([1] * 32)
OWNER = bytes(range(100, 132))
CLASS = bytes([3] * 32)


def test_decode_name_record():
    payload = os.urandom(40)
    record = decode_name_record(NAME_KEY, PARENT + OWNER + CLASS + payload)
    assert record.name_key == NAME_KEY
    assert bytes(record.parent_name) == PARENT
    assert bytes(record.owner) == OWNER
    assert bytes(record.name_class) == CLASS
    assert record.data == payload
    assert record.lamports is None


def test_decode_header_only():
    record = decode_name_record(NAME_KEY, PARENT + OWNER + CLASS)
    assert record.data == b""


def test_decode_random_fields():
    parent, owner, klass = os.urandom(32), os.urandom(32), os.urandom(32)
    for size in (0, 1, 32, 1000):
        payload = os.urandom(size)
        record = decode_name_record(NAME_KEY, bytearray(parent + owner + klass + payload))
        assert (bytes(record.parent_name), bytes(record.owner), bytes(record.name_class)) == (
            parent,
            owner,
            klass,
        )
        assert record.data == payload
        assert isinstance(record.data, bytes)


def test_decode_short_data():
    for size in range(HEADER_LEN):
        with pytest.raises(InvalidRecordError):
            decode_name_record(NAME_KEY, bytes(size))


def test_decode_missing_account():
    with pytest.raises(AccountNotFoundError):
        decode_name_record(NAME_KEY, None)


def test_unset_helpers():
    record = decode_name_record(NAME_KEY, bytes(32) + OWNER + bytes(32))
    assert record.is_parent_unset
    assert record.is_class_unset
    record = decode_name_record(NAME_KEY, PARENT + OWNER + CLASS)
    assert not record.is_parent_unset
    assert not record.is_class_unset


def test_parse_name_account_info():
    program = Pubkey(bytes([5] * 32))
    account = MagicMock(
        data=PARENT + OWNER + CLASS + b"hello",
        owner=program,
        lamports=2039280,
        rent_epoch=361,
        executable=False,
    )
    record = parse_name_account_info(NAME_KEY, account)
    assert isinstance(record, NameRecord)
    assert bytes(record.owner) == OWNER
    assert record.data == b"hello"
    assert record.lamports == 2039280
    assert record.rent_epoch == 361
    assert record.account_owner == program
    assert record.executable is False


def test_parse_name_account_info_errors():
    with pytest.raises(AccountNotFoundError):
        parse_name_account_info(NAME_KEY, None)
    with pytest.raises(InvalidRecordError):
        parse_name_account_info(NAME_KEY, MagicMock(data=b"\x00" * 95))


def test_parse_name_account_info_without_data():
    with pytest.raises(InvalidRecordError):
        parse_name_account_info(NAME_KEY, MagicMock(data=None))
