"""Storage interface definitions for ingested supplier notes.

Persisting and querying notes is the storage collaborator's job; the
ingestion pipeline only hands it two outputs: the supplier registry and the
finalized note records.
"""

from abc import ABC, abstractmethod

from suppliernotes.note import NoteRecord
from suppliernotes.supplier import SupplierIdentity


class SupplierStorageInterface(ABC):
    """Abstract interface for supplier registry storage."""

    @abstractmethod
    async def add(self, supplier: SupplierIdentity) -> str:
        """Store a supplier and return its ID.

        If a supplier with the same ID already exists, the stored one is
        kept unchanged (insert-or-ignore).
        """

    @abstractmethod
    async def get(self, supplier_id: str) -> SupplierIdentity | None:
        """Retrieve a supplier by ID, or None if not found."""

    @abstractmethod
    async def find_by_normalized_key(self, normalized_key: str) -> SupplierIdentity | None:
        """Retrieve a supplier by its normalized name key, or None."""

    @abstractmethod
    async def list_all(self, limit: int = 1000, offset: int = 0) -> list[SupplierIdentity]:
        """List suppliers ordered by display name, with pagination."""

    @abstractmethod
    async def count(self) -> int:
        """Return total number of stored suppliers."""


class NoteStorageInterface(ABC):
    """Abstract interface for note record storage."""

    @abstractmethod
    async def add(self, note: NoteRecord) -> int:
        """Store a note and return the storage-assigned integer ID."""

    @abstractmethod
    async def get(self, note_id: int) -> NoteRecord | None:
        """Retrieve a note by its storage ID, or None if not found."""

    @abstractmethod
    async def find_by_supplier(self, supplier_id: str) -> list[NoteRecord]:
        """Return a supplier's notes, newest date first, undated notes last."""

    @abstractmethod
    async def list_all(self, limit: int = 1000, offset: int = 0) -> list[NoteRecord]:
        """List notes in insertion order, with pagination."""

    @abstractmethod
    async def count(self) -> int:
        """Return total number of stored notes."""
