"""
Password hashing with bcrypt.

bcrypt is CPU bound; hashing and checking run in a worker thread so the event
loop keeps serving other requests.
"""

import asyncio
from typing import Optional

import bcrypt

from config import ApplicationConfig

_dummy_hash: Optional[str] = None


def _hash_sync(password: str, rounds: int) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds)).decode("utf-8")


def _check_sync(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


async def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh salt (BCRYPT_ROUNDS cost)"""
    return await asyncio.to_thread(_hash_sync, password, ApplicationConfig.BCRYPT_ROUNDS)


async def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison of a plaintext password against a bcrypt hash"""
    return await asyncio.to_thread(_check_sync, password, password_hash)


async def burn_password_check(password: str) -> None:
    """
    Spend the same time as a real check when no user matched.

    Keeps "unknown email" and "wrong password" indistinguishable by timing.
    """
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = await hash_password("dummy_password_for_timing")
    await verify_password(password, _dummy_hash)
