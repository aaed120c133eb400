"""
Per-key locks serializing read-modify-write sequences on the key-value store
"""
import asyncio
import weakref

_locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = weakref.WeakValueDictionary()


def key_lock(key: str) -> asyncio.Lock:
    """
    Lock shared by every caller working on the same storage key

    Locks live only while someone holds a reference, so idle clients cost nothing.
    Serialization is per process.
    """
    lock = _locks.get(key)
    if lock is None:
        lock = asyncio.Lock()
        _locks[key] = lock
    return lock
