"""JSONL export of an ingestion run.

An export directory holds three files:

- `suppliers.jsonl`: one `SupplierIdentity` per line
- `notes.jsonl`: one `NoteRecord` per line, keywords as a JSON list
- `manifest.json`: document id, source, counts, export time, git hash

The storage collaborator can load these files into whatever schema it uses.
"""

import subprocess
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional

from pydantic import BaseModel

from suppliernotes.ingest import IngestionResult

SUPPLIERS_FILE = "suppliers.jsonl"
NOTES_FILE = "notes.jsonl"
MANIFEST_FILE = "manifest.json"


class ExportManifest(BaseModel):
    """Summary written next to the exported records."""

    model_config = {"frozen": True}

    document_id: str
    source_uri: Optional[str] = None
    supplier_count: int
    note_count: int
    sections_dropped: int = 0
    notes_dropped: int = 0
    failure_count: int = 0
    exported_at: datetime
    git_hash: Optional[str] = None
    files: tuple[str, ...] = (SUPPLIERS_FILE, NOTES_FILE)


def get_git_hash() -> Optional[str]:
    """Gets the current git commit hash in short format.

    Used to version-stamp exports with the codebase state that produced
    them.

    Returns:
        The short git commit hash (e.g., "6b50d25") as a string, or `None`
        if the git command fails (e.g., not in a git repository).
    """
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True,
            text=True,
            check=True,
            timeout=5.0,
        )
        return result.stdout.strip()
    except (subprocess.CalledProcessError, FileNotFoundError, subprocess.TimeoutExpired):
        return None


def _write_jsonl(path: Path, rows: Iterable[BaseModel]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        for row in rows:
            f.write(row.model_dump_json())
            f.write("\n")


def write_export(result: IngestionResult, output_dir: str | Path) -> ExportManifest:
    """Write a run's suppliers, notes and manifest into output_dir.

    The directory is created if needed; existing export files are
    overwritten.

    Args:
        result: The ingestion result to export.
        output_dir: Destination directory.

    Returns:
        The manifest that was written.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    _write_jsonl(output_dir / SUPPLIERS_FILE, result.suppliers)
    _write_jsonl(output_dir / NOTES_FILE, result.records)

    manifest = ExportManifest(
        document_id=result.document_id,
        source_uri=result.source_uri,
        supplier_count=len(result.suppliers),
        note_count=len(result.records),
        sections_dropped=result.sections_dropped,
        notes_dropped=result.notes_dropped,
        failure_count=len(result.failures),
        exported_at=datetime.now(timezone.utc),
        git_hash=get_git_hash(),
    )
    (output_dir / MANIFEST_FILE).write_text(manifest.model_dump_json(indent=2), encoding="utf-8")
    return manifest
