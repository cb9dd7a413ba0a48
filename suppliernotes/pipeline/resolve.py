"""Supplier name normalization and per-run identity resolution.

Normalization is a fixed pipeline of deterministic rewrites, applied in
this order:

1. lowercase
2. strip punctuation
3. drop legal-entity suffix words (inc, llc, corp, corporation, company,
   co, ltd, limited)
4. spell "manufacturing" and "mfg" the same way ("mfg")
5. collapse whitespace and trim

followed by one hard-coded business rule: any key containing "apex" becomes
exactly "apex". The Apex supplier appears under many unrelated spellings in
the corpus and they are all the same company. This is a single override for
one known supplier, not a general matching strategy.

The supplier id is the first 8 hex digits of the MD5 of the normalized key,
so the same key always yields the same id, in every run. The mapping from
keys to identities, on the other hand, lives only as long as the resolver
instance that built it.
"""

import hashlib
import logging
import re
from typing import Mapping

from suppliernotes.clock import IngestionClock
from suppliernotes.lexicon import DEFAULT_NAME_ALIASES
from suppliernotes.pipeline.interfaces import SupplierResolverInterface
from suppliernotes.supplier import SupplierIdentity

logger = logging.getLogger(__name__)

LEGAL_SUFFIXES: tuple[str, ...] = ("inc", "llc", "corp", "corporation", "company", "co", "ltd", "limited")
MANUFACTURING_SPELLING = "mfg"
APEX_KEY = "apex"
FINGERPRINT_LENGTH = 8

_PUNCTUATION = re.compile(r"[^\w\s]")
_LEGAL_SUFFIX = re.compile(r"\b(?:" + "|".join(LEGAL_SUFFIXES) + r")\b")
_MANUFACTURING = re.compile(r"\b(?:manufacturing|mfg)\b")
_WHITESPACE = re.compile(r"\s+")


def normalize_supplier_name(name: str) -> str:
    """Return the normalized key used to decide supplier equality."""
    key = name.casefold()
    key = _PUNCTUATION.sub("", key)
    key = _LEGAL_SUFFIX.sub("", key)
    key = _MANUFACTURING.sub(MANUFACTURING_SPELLING, key)
    key = _WHITESPACE.sub(" ", key).strip()
    if APEX_KEY in key:
        return APEX_KEY
    return key


def title_case_name(name: str) -> str:
    """Capitalize the first letter of each space-separated word, lowercase the rest."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in name.strip().split(" "))


def check_aliases(aliases: Mapping[str, str]) -> dict[str, str]:
    """Return aliases as a dict, rejecting any display name that would change the key.

    Raises:
        ValueError: If an alias normalizes differently from its header text.
    """
    for raw, display in aliases.items():
        if normalize_supplier_name(raw) != normalize_supplier_name(display):
            raise ValueError(f"Alias {display!r} does not normalize to the same key as {raw!r}")
    return dict(aliases)


def supplier_fingerprint(normalized_key: str) -> str:
    """Return the short stable id for a normalized key."""
    digest = hashlib.md5(normalized_key.encode("utf-8"), usedforsecurity=False).hexdigest()
    return digest[:FINGERPRINT_LENGTH]


class SupplierResolver(SupplierResolverInterface):
    """Dedup index mapping normalized supplier keys to identities for one run.

    The first spelling resolved for a key fixes the identity's display name:
    the alias table entry for that exact header text when there is one,
    otherwise the title-cased spelling. Later spellings return the existing
    identity untouched.

    Thread safety: Not thread-safe. Each ingestion run owns its own resolver.

    Example:
        ```python
        resolver = SupplierResolver()
        a = resolver.resolve("APEX MFG INC")
        b = resolver.resolve("Apex Manufacturing")
        assert a is b
        ```
    """

    def __init__(
        self,
        aliases: Mapping[str, str] | None = None,
        clock: IngestionClock | None = None,
    ) -> None:
        self._aliases = check_aliases(DEFAULT_NAME_ALIASES if aliases is None else aliases)
        self._clock = clock
        self._by_key: dict[str, SupplierIdentity] = {}
        self._by_id: dict[str, SupplierIdentity] = {}

    def display_name(self, raw_name: str) -> str:
        """Return the display name a first sighting of raw_name would get."""
        raw_name = raw_name.strip()
        return self._aliases.get(raw_name) or title_case_name(raw_name)

    def resolve(self, raw_name: str) -> SupplierIdentity:
        """Return the identity for raw_name, creating it on first sight.

        Raises:
            ValueError: If raw_name normalizes to an empty key.
        """
        key = normalize_supplier_name(raw_name)
        if not key:
            raise ValueError(f"Supplier name {raw_name!r} normalizes to an empty key")

        existing = self._by_key.get(key)
        if existing is not None:
            return existing

        supplier_id = supplier_fingerprint(key)
        clock = self._clock or IngestionClock.utcnow()
        identity = SupplierIdentity(
            supplier_id=supplier_id,
            display_name=self.display_name(raw_name),
            normalized_key=key,
            created_at=clock.now,
        )
        self._by_key[key] = identity
        self._by_id[supplier_id] = identity
        logger.debug("New supplier %s: %r (%s)", supplier_id, identity.display_name, key)
        return identity

    def get(self, supplier_id: str) -> SupplierIdentity | None:
        return self._by_id.get(supplier_id)

    def list_all(self) -> list[SupplierIdentity]:
        return list(self._by_key.values())

    def __len__(self) -> int:
        return len(self._by_key)
