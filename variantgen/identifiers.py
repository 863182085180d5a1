from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Sequence, Tuple

DEFAULT_LABEL = "Default"

_WS_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class SynthesizedIdentity:
    sku: str
    label: str


def normalize_token(s: str) -> str:
    return _WS_RE.sub("-", s.strip().upper())


def synthesize(base_sku: str, labeled_tuple: Sequence[Tuple[str, str]]) -> SynthesizedIdentity:
    parts = [normalize_token(base_sku)]
    parts.extend(normalize_token(value) for _, value in labeled_tuple)
    label = " / ".join(f"{dim}: {value}" for dim, value in labeled_tuple) or DEFAULT_LABEL
    return SynthesizedIdentity(sku="-".join(parts), label=label)
