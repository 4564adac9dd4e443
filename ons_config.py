# ---------------- CONFIG ----------------
import os

from dotenv import load_dotenv
from solana.rpc.api import Client
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment
from solders.pubkey import Pubkey

from name_service import NAME_PROGRAM_ID

load_dotenv()

DEFAULT_RPC_URL = "https://api.mainnet-beta.solana.com"
DEFAULT_COMMITMENT = "confirmed"
COMMITMENT_LEVELS = ("processed", "confirmed", "finalized")


def get_rpc_url() -> str:
    return os.getenv("SOLANA_RPC_URL") or DEFAULT_RPC_URL


def get_commitment() -> Commitment:
    level = (os.getenv("SOLANA_COMMITMENT") or DEFAULT_COMMITMENT).strip().lower()
    if level not in COMMITMENT_LEVELS:
        raise ValueError(
            f"SOLANA_COMMITMENT must be one of {', '.join(COMMITMENT_LEVELS)}, got {level!r}"
        )
    return Commitment(level)


def get_program_id() -> Pubkey:
    override = os.getenv("NAME_PROGRAM_ID")
    if override:
        return Pubkey.from_string(override.strip())
    return NAME_PROGRAM_ID


def get_client() -> Client:
    return Client(get_rpc_url(), commitment=get_commitment())


def get_async_client() -> AsyncClient:
    return AsyncClient(get_rpc_url(), commitment=get_commitment())
