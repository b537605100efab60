# topmark:header:start
#
#   project      : FrontOpts
#   file         : locations.py
#   file_relpath : src/frontopts/diagnostic/locations.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source documents and the locations diagnostics are bound to.

A front end keeps editing sessions alive across revisions of the same logical
document. The protocols below are the contract a document revision must satisfy for
diagnostics to follow it; `SourceDocument` and `SourceLocation` are the in-process
implementation used by the option parser and by tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class SourceLocationLike(Protocol):
    """Structural interface for a span of a source document."""

    @property
    def document(self) -> SourceDocumentLike:
        """The document revision this location refers to."""
        ...


@runtime_checkable
class SourceDocumentLike(Protocol):
    """Structural interface for one revision of a source document."""

    @property
    def name(self) -> str:
        """Name of the logical document (usually a path)."""
        ...

    def is_updated_version_of(self, other: SourceDocumentLike) -> bool:
        """Return True if this revision was derived from ``other``."""
        ...

    def get_corresponding_location(self, location: SourceLocationLike) -> SourceLocationLike:
        """Map a location of an older revision onto this revision."""
        ...


@dataclass(frozen=True, eq=False)
class SourceDocument:
    """An immutable revision of a source document.

    Revisions compare by identity: two revisions with the same text are still
    distinct documents.

    Attributes:
        name (str): Name of the logical document.
        text (str): Full text of this revision.
        previous (SourceDocument | None): The revision this one was derived from.
    """

    name: str
    text: str = ""
    previous: SourceDocument | None = None

    def revisions(self) -> Iterator[SourceDocument]:
        """Iterate over this revision and all the revisions it was derived from."""
        doc: SourceDocument | None = self
        while doc is not None:
            yield doc
            doc = doc.previous

    def is_updated_version_of(self, other: SourceDocumentLike) -> bool:
        """Return True if ``other`` is a strict ancestor of this revision."""
        return any(doc is other for doc in self.revisions() if doc is not self)

    def update(self, text: str) -> SourceDocument:
        """Return a new revision of this document with ``text``."""
        return SourceDocument(name=self.name, text=text, previous=self)

    def get_corresponding_location(self, location: SourceLocationLike) -> SourceLocation:
        """Map ``location`` onto this revision.

        Offsets are preserved and clamped to the length of this revision's text.

        Args:
            location (SourceLocationLike): A location of this or an older revision.

        Returns:
            SourceLocation: The equivalent location in this revision.
        """
        start: int = getattr(location, "start", 0)
        length: int = getattr(location, "length", 0)
        size: int = len(self.text)
        start = min(start, size)
        return SourceLocation(document=self, start=start, length=min(length, size - start))

    def location(self, start: int = 0, length: int = 0) -> SourceLocation:
        """Return the location of ``length`` characters at ``start`` in this revision."""
        return SourceLocation(document=self, start=start, length=length)


@dataclass(frozen=True)
class SourceLocation:
    """A span of characters in one revision of a source document.

    Attributes:
        document (SourceDocument): The document revision.
        start (int): Starting character offset (0-indexed).
        length (int): Number of characters covered.
    """

    document: SourceDocument
    start: int = 0
    length: int = 0

    def __post_init__(self) -> None:
        """Validate offsets.

        Raises:
            ValueError: If ``start`` or ``length`` is negative.
        """
        if self.start < 0:
            raise ValueError(f"SourceLocation.start must be >= 0, got {self.start}")
        if self.length < 0:
            raise ValueError(f"SourceLocation.length must be >= 0, got {self.length}")

    @property
    def end(self) -> int:
        """Ending character offset (exclusive)."""
        return self.start + self.length

    @property
    def line(self) -> int:
        """Line number of ``start`` (1-indexed)."""
        return self.document.text.count("\n", 0, self.start) + 1

    @property
    def column(self) -> int:
        """Column number of ``start`` (1-indexed)."""
        return self.start - (self.document.text.rfind("\n", 0, self.start) + 1) + 1

    @property
    def source_text(self) -> str:
        """The characters covered by this location."""
        return self.document.text[self.start : self.end]


#: Stand-in document for diagnostics that have no source, such as option errors.
DUMMY_DOCUMENT: SourceDocument = SourceDocument(name="")

DUMMY_LOCATION: SourceLocation = SourceLocation(document=DUMMY_DOCUMENT)
