# case_ids.py
import numpy as np

FNV_OFFSET = 2166136261
FNV_PRIME = 16777619


def _utf16_units(s: str):
    raw = s.encode("utf-16-le")
    for i in range(0, len(raw), 2):
        yield raw[i] | (raw[i + 1] << 8)


def hash_case_id(secret: str, source_key: str) -> str:
    """Keyed 32-bit FNV-1a of 'secret::source_key', base36, zero-padded to 8 chars."""
    h = FNV_OFFSET
    for unit in _utf16_units(f"{secret}::{source_key}"):
        h ^= unit
        h = (h * FNV_PRIME) & 0xFFFFFFFF
    return np.base_repr(h, 36).upper().rjust(8, "0")
