"""In-memory storage implementations for testing and development.

Dictionary-based implementations of the storage interfaces. Suitable for
unit tests, the command line tool, and small corpora.

**Not recommended for production** due to:
- No persistence (data is lost when the process exits)
- No concurrency control (not safe for multi-process access)
- O(n) search operations (no secondary indexes)
"""

from suppliernotes.note import NoteRecord
from suppliernotes.storage.interfaces import NoteStorageInterface, SupplierStorageInterface
from suppliernotes.supplier import SupplierIdentity


class InMemorySupplierStorage(SupplierStorageInterface):
    """In-memory supplier storage keyed by supplier_id.

    Thread safety: Not thread-safe.

    Example:
        ```python
        storage = InMemorySupplierStorage()
        await storage.add(identity)
        found = await storage.get(identity.supplier_id)
        ```
    """

    def __init__(self) -> None:
        self._suppliers: dict[str, SupplierIdentity] = {}

    async def add(self, supplier: SupplierIdentity) -> str:
        """Adds a supplier unless one with the same ID is already stored.

        Args:
            supplier: The `SupplierIdentity` to add.

        Returns:
            The supplier's ID.
        """
        self._suppliers.setdefault(supplier.supplier_id, supplier)
        return supplier.supplier_id

    async def get(self, supplier_id: str) -> SupplierIdentity | None:
        return self._suppliers.get(supplier_id)

    async def find_by_normalized_key(self, normalized_key: str) -> SupplierIdentity | None:
        """Finds a supplier by normalized key with an O(n) scan."""
        for supplier in self._suppliers.values():
            if supplier.normalized_key == normalized_key:
                return supplier
        return None

    async def list_all(self, limit: int = 1000, offset: int = 0) -> list[SupplierIdentity]:
        suppliers = sorted(self._suppliers.values(), key=lambda s: s.display_name)
        return suppliers[offset : offset + limit]

    async def count(self) -> int:
        return len(self._suppliers)


class InMemoryNoteStorage(NoteStorageInterface):
    """In-memory note storage with sequential integer IDs starting at 1.

    Thread safety: Not thread-safe.
    """

    def __init__(self) -> None:
        self._notes: dict[int, NoteRecord] = {}
        self._next_id = 1

    async def add(self, note: NoteRecord) -> int:
        """Stores a note under the next sequential ID.

        Args:
            note: The `NoteRecord` to store.

        Returns:
            The ID assigned to the note.
        """
        note_id = self._next_id
        self._notes[note_id] = note
        self._next_id += 1
        return note_id

    async def get(self, note_id: int) -> NoteRecord | None:
        return self._notes.get(note_id)

    async def find_by_supplier(self, supplier_id: str) -> list[NoteRecord]:
        """Returns a supplier's notes, newest first.

        Dates are compared as strings, which orders ISO dates correctly.
        Notes without a date sort after all dated notes, keeping their
        insertion order.
        """
        notes = [n for n in self._notes.values() if n.supplier_id == supplier_id]
        dated = sorted((n for n in notes if n.date), key=lambda n: n.date or "", reverse=True)
        undated = [n for n in notes if not n.date]
        return dated + undated

    async def list_all(self, limit: int = 1000, offset: int = 0) -> list[NoteRecord]:
        notes = list(self._notes.values())
        return notes[offset : offset + limit]

    async def count(self) -> int:
        return len(self._notes)
