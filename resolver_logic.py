import logging
from typing import List, Optional, Sequence

from solana.rpc.api import Client
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment
from solders.pubkey import Pubkey

from name_record import NameRecord, parse_name_account_info
from name_service import (
    NAME_PROGRAM_ID,
    derive_name_account_key_async,
    get_hashed_name,
    get_name_account_key_by_name,
)
from ons_errors import EmptyPathError

logger = logging.getLogger(__name__)


def split_domain(domain: str) -> List[str]:
    # Trim + lower-case is the only normalization, labels are not validated
    return domain.strip().lower().split(".")


def _check_path(path: Sequence[str]) -> None:
    if isinstance(path, str):
        raise TypeError("path must be a sequence of labels, use resolve_std_ons for dotted names")
    if len(path) == 0:
        raise EmptyPathError("name path is empty, can not derive the key path")


def resolve_utf8_ons(
    path: Sequence[str],
    unknown_parent: Optional[Pubkey] = None,
    program_id: Pubkey = NAME_PROGRAM_ID,
) -> List[Pubkey]:
    """
    Resolve a label path such as ``["a", "b", "c"]`` to its name keys.

    Labels are derived from the last one back to the first. Each derived key
    is the parent of the label before it, and ``unknown_parent`` is the
    parent of the last label (zero key when omitted). The returned keys are
    in the same order as ``path``. Class is never part of these seeds.
    """
    _check_path(path)

    keys: List[Pubkey] = []
    parent = unknown_parent
    for name in reversed(path):
        key = get_name_account_key_by_name(name, name_parent=parent, program_id=program_id)
        keys.append(key)
        parent = key

    keys.reverse()
    return keys


def resolve_std_ons(
    domain: str,
    unknown_parent: Optional[Pubkey] = None,
    program_id: Pubkey = NAME_PROGRAM_ID,
) -> List[Pubkey]:
    """Resolve a dotted name like ``a.b.c``; keys come back in ``a, b, c`` order."""
    return resolve_utf8_ons(split_domain(domain), unknown_parent, program_id)


def resolve_leaf_key(
    domain: str,
    unknown_parent: Optional[Pubkey] = None,
    program_id: Pubkey = NAME_PROGRAM_ID,
) -> Pubkey:
    return resolve_std_ons(domain, unknown_parent, program_id)[0]


async def resolve_utf8_ons_async(
    path: Sequence[str],
    unknown_parent: Optional[Pubkey] = None,
    program_id: Pubkey = NAME_PROGRAM_ID,
) -> List[Pubkey]:
    _check_path(path)

    keys: List[Pubkey] = []
    parent = unknown_parent
    for name in reversed(path):
        key = await derive_name_account_key_async(
            get_hashed_name(name), name_parent=parent, program_id=program_id
        )
        keys.append(key)
        parent = key

    keys.reverse()
    return keys


async def resolve_std_ons_async(
    domain: str,
    unknown_parent: Optional[Pubkey] = None,
    program_id: Pubkey = NAME_PROGRAM_ID,
) -> List[Pubkey]:
    return await resolve_utf8_ons_async(split_domain(domain), unknown_parent, program_id)


def query_name_info(
    client: Client, name_key: Pubkey, commitment: Optional[Commitment] = None
) -> NameRecord:
    """Fetch the account at ``name_key`` and decode it as a name record."""
    res = client.get_account_info(name_key, commitment=commitment)
    return parse_name_account_info(name_key, res.value)


async def query_name_info_async(
    client: AsyncClient, name_key: Pubkey, commitment: Optional[Commitment] = None
) -> NameRecord:
    res = await client.get_account_info(name_key, commitment=commitment)
    return parse_name_account_info(name_key, res.value)


def query_domain(
    client: Client,
    domain: str,
    unknown_parent: Optional[Pubkey] = None,
    commitment: Optional[Commitment] = None,
    program_id: Pubkey = NAME_PROGRAM_ID,
) -> NameRecord:
    """Resolve ``domain`` and fetch the record of its first (leaf) label."""
    name_key = resolve_leaf_key(domain, unknown_parent, program_id)
    logger.debug("querying %s at %s", domain, name_key)
    return query_name_info(client, name_key, commitment)
