import asyncio
import hashlib
import logging
from typing import Optional, Tuple

from solders.pubkey import Pubkey

from ons_errors import DerivationExhaustedError

logger = logging.getLogger(__name__)

# SPL Name Service constants
NAME_PROGRAM_ID = Pubkey.from_string("namesLPneVptA9Z5rqUDD9tMTWEJwofgaYwp8cawRkX")
# Changing the prefix moves every derived key.
HASH_PREFIX = "SPL Name Service"

KEY_LEN = 32
ZERO_KEY = bytes(KEY_LEN)
MAX_BUMP = 255

# Raises solders PubkeyError (not exported by solders.errors) for on-curve seeds
_create_program_address = Pubkey.create_program_address


def get_hashed_name(name: str) -> bytes:
    """SHA-256 of HASH_PREFIX + name. No case folding happens here."""
    return hashlib.sha256((HASH_PREFIX + name).encode("utf-8")).digest()


def _seed_key(key: Optional[Pubkey]) -> bytes:
    return bytes(key) if key is not None else ZERO_KEY


def find_name_account_key(
    hashed_name: bytes,
    *,
    name_class: Optional[Pubkey] = None,
    name_parent: Optional[Pubkey] = None,
    program_id: Pubkey = NAME_PROGRAM_ID,
) -> Tuple[Pubkey, int]:
    """
    Derive the program address for a hashed name and return it with its bump.

    Seeds are always three 32 byte values: the hash, the class and the
    parent. A missing class or parent is written as 32 zero bytes.
    """
    if len(hashed_name) != KEY_LEN:
        raise ValueError(f"hashed name must be {KEY_LEN} bytes, got {len(hashed_name)}")

    seeds = [
        hashed_name,
        _seed_key(name_class),
        _seed_key(name_parent),
    ]
    for bump in range(MAX_BUMP, -1, -1):
        try:
            key = _create_program_address(seeds + [bytes([bump])], program_id)
        except Exception:
            # seeds are fixed-size, so the only failure left is an on-curve candidate
            continue
        return key, bump

    raise DerivationExhaustedError(
        f"no off-curve address for seeds under program {program_id}"
    )


def get_name_account_key(
    hashed_name: bytes,
    *,
    name_class: Optional[Pubkey] = None,
    name_parent: Optional[Pubkey] = None,
    program_id: Pubkey = NAME_PROGRAM_ID,
) -> Pubkey:
    key, _ = find_name_account_key(
        hashed_name,
        name_class=name_class,
        name_parent=name_parent,
        program_id=program_id,
    )
    return key


def get_name_account_key_by_name(
    name: str,
    *,
    name_parent: Optional[Pubkey] = None,
    name_class: Optional[Pubkey] = None,
    program_id: Pubkey = NAME_PROGRAM_ID,
) -> Pubkey:
    """Hash a single label and derive its name account key."""
    key = get_name_account_key(
        get_hashed_name(name),
        name_class=name_class,
        name_parent=name_parent,
        program_id=program_id,
    )
    logger.debug("derived %r (parent=%s) -> %s", name, name_parent, key)
    return key


async def derive_name_account_key_async(
    hashed_name: bytes,
    *,
    name_class: Optional[Pubkey] = None,
    name_parent: Optional[Pubkey] = None,
    program_id: Pubkey = NAME_PROGRAM_ID,
) -> Pubkey:
    # The bump search is CPU bound, keep it off the event loop
    return await asyncio.to_thread(
        get_name_account_key,
        hashed_name,
        name_class=name_class,
        name_parent=name_parent,
        program_id=program_id,
    )
