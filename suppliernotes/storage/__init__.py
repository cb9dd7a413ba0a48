"""Storage interfaces and implementations."""

from suppliernotes.storage.interfaces import NoteStorageInterface, SupplierStorageInterface
from suppliernotes.storage.memory import InMemoryNoteStorage, InMemorySupplierStorage

__all__ = [
    "SupplierStorageInterface",
    "NoteStorageInterface",
    "InMemorySupplierStorage",
    "InMemoryNoteStorage",
]
