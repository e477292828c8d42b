# folio/content/scanner.py
"""
Content scanner.

Walks a content directory, loads every document file and keeps going when
one of them fails: failures are collected per file, never raised.

Usage:
    scanner = ContentScanner()
    result = scanner.scan("content/")

    for doc in result.documents:
        print(doc.path, doc.title)
    for error in result.errors:
        print(f"{error.path}: {error.message}")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from folio.content.frontmatter import load_document
from folio.core.document import ContentDocument
from folio.core.exceptions import DocumentError
from folio.logging.logger import get_logger
from folio.logging.tags import SCAN

logger = get_logger(__name__)

DEFAULT_EXTENSIONS: Set[str] = {".md", ".markdown", ".mdx"}


@dataclass(frozen=True)
class ScanError:
    """A file that could not be loaded."""

    path: Path
    message: str
    error: DocumentError = field(compare=False, repr=False)


@dataclass
class ScanResult:
    """
    Result of scanning a file or directory.

    Documents and errors are ordered by path.
    """

    root: Path
    documents: List[ContentDocument] = field(default_factory=list)
    errors: List[ScanError] = field(default_factory=list)
    skipped_extensions: Dict[str, int] = field(default_factory=dict)

    @property
    def total_loaded(self) -> int:
        return len(self.documents)

    @property
    def total_errors(self) -> int:
        return len(self.errors)

    @property
    def total_skipped(self) -> int:
        return sum(self.skipped_extensions.values())

    @property
    def ok(self) -> bool:
        return not self.errors


class ContentScanner:
    """
    Discovers and loads content documents.

    A single file is always loaded, whatever its extension. Directories
    are filtered by extension.
    """

    def __init__(
        self,
        extensions: Optional[Iterable[str]] = None,
        recursive: bool = True,
    ) -> None:
        self._extensions = {ext.lower() for ext in extensions} if extensions else DEFAULT_EXTENSIONS
        self._recursive = recursive

    @property
    def extensions(self) -> Set[str]:
        return set(self._extensions)

    def discover(self, root: str | Path) -> Tuple[List[Path], Dict[str, int]]:
        """
        Find candidate files under root.

        Returns:
            (files sorted by path, skipped file counts by extension)

        Raises:
            FileNotFoundError: If root does not exist.
        """
        root_path = Path(root)
        if not root_path.exists():
            raise FileNotFoundError(f"Path does not exist: {root_path}")

        if root_path.is_file():
            return [root_path], {}

        files: List[Path] = []
        skipped: Dict[str, int] = {}
        for path in self._walk(root_path):
            ext = path.suffix.lower()
            if ext in self._extensions:
                files.append(path)
            else:
                skipped[ext] = skipped.get(ext, 0) + 1

        return sorted(files), skipped

    def scan(self, root: str | Path) -> ScanResult:
        """Discover and load every document under root."""
        files, skipped = self.discover(root)
        result = ScanResult(root=Path(root), skipped_extensions=skipped)

        for path in files:
            try:
                result.documents.append(load_document(path))
            except DocumentError as e:
                logger.warning(f"{SCAN} Skipping {path}: {e.message}")
                result.errors.append(ScanError(path=path, message=e.message, error=e))

        logger.info(
            f"{SCAN} Scanned {result.root}: {result.total_loaded} documents, "
            f"{result.total_errors} errors, {result.total_skipped} skipped"
        )
        return result

    def _walk(self, root: Path) -> Iterator[Path]:
        pattern_iter = root.rglob("*") if self._recursive else root.glob("*")
        for path in pattern_iter:
            if not path.is_file():
                continue
            if any(part.startswith(".") for part in path.relative_to(root).parts):
                continue
            yield path


__all__ = ["ContentScanner", "ScanResult", "ScanError", "DEFAULT_EXTENSIONS"]
