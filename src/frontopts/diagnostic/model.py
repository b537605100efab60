# topmark:header:start
#
#   project      : FrontOpts
#   file         : model.py
#   file_relpath : src/frontopts/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The `Diagnostic` value type.

A diagnostic is created where a problem is detected and never changes afterwards. The
single permitted transformation is `Diagnostic.retarget`, which follows the source
document to a newer revision.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from frontopts.constants import REPORTER_ID
from frontopts.diagnostic.errors import DiagnosticArgumentError
from frontopts.diagnostic.kinds import DiagnosticKind, Severity, classify
from frontopts.diagnostic.localization import DEFAULT_LOCALIZER, substitute
from frontopts.diagnostic.locations import DUMMY_LOCATION

if TYPE_CHECKING:
    from frontopts.diagnostic.localization import Localizer
    from frontopts.diagnostic.locations import SourceDocumentLike, SourceLocationLike


@dataclass(frozen=True)
class Diagnostic:
    """One reported problem, bound to a source location.

    Attributes:
        kind (DiagnosticKind): What went wrong; also fixes code and severity.
        arguments (tuple[str, ...]): Values substituted for the ``{i}`` placeholders of
            the kind's message template, in order.
        location (SourceLocationLike): Primary location of the problem.
        related_locations (tuple[SourceLocationLike, ...]): Other locations involved.
    """

    kind: DiagnosticKind
    arguments: tuple[str, ...] = ()
    location: SourceLocationLike = DUMMY_LOCATION
    related_locations: tuple[SourceLocationLike, ...] = field(default=())

    def __post_init__(self) -> None:
        """Check the arguments against the kind's template.

        Raises:
            DiagnosticArgumentError: If an argument is not a string or the number of
                arguments differs from the number of placeholders of the template.
        """
        # Accept any sequence at construction; store a tuple.
        object.__setattr__(self, "arguments", tuple(self.arguments))
        object.__setattr__(self, "related_locations", tuple(self.related_locations))
        for arg in self.arguments:
            if not isinstance(arg, str):
                raise DiagnosticArgumentError(
                    f"{self.kind.name}: arguments must be strings, got {type(arg).__name__}"
                )
        expected: int = self.kind.placeholder_count
        if len(self.arguments) != expected:
            raise DiagnosticArgumentError(
                f"{self.kind.name} takes {expected} argument(s), got {len(self.arguments)}"
            )

    @classmethod
    def of(
        cls,
        kind: DiagnosticKind,
        *arguments: str,
        location: SourceLocationLike = DUMMY_LOCATION,
        related_locations: tuple[SourceLocationLike, ...] = (),
    ) -> Diagnostic:
        """Convenience constructor taking the arguments positionally."""
        return cls(
            kind=kind,
            arguments=arguments,
            location=location,
            related_locations=related_locations,
        )

    @property
    def code(self) -> int:
        """Stable numeric error code."""
        return int(self.kind)

    @property
    def message_key(self) -> str:
        """Key used to look up the localized message."""
        return self.kind.message_key

    @property
    def severity(self) -> Severity:
        """Severity fixed by the kind."""
        return classify(self.kind)

    @property
    def is_warning(self) -> bool:
        """True if this diagnostic does not by itself indicate a failed compilation."""
        return self.severity is Severity.WARNING

    @property
    def reporter(self) -> str:
        """Short identifier of the reporting subsystem, used to filter by origin."""
        return REPORTER_ID

    @property
    def document(self) -> SourceDocumentLike:
        """The document revision the primary location refers to."""
        return self.location.document

    def render(self, localizer: Localizer | None = None) -> str:
        """Render the message for this diagnostic.

        Args:
            localizer (Localizer | None): Source of the message template; the built-in
                English catalog when None.

        Returns:
            str: The message with the arguments substituted.

        Raises:
            DiagnosticArgumentError: If the localized template references a placeholder
                beyond the supplied arguments.
        """
        template: str = (localizer or DEFAULT_LOCALIZER).template_for(self.kind)
        return substitute(template, self.arguments)

    @property
    def message(self) -> str:
        """The message rendered with the built-in catalog."""
        return self.render()

    def retarget(self, document: SourceDocumentLike) -> Diagnostic:
        """Return this diagnostic bound to ``document``.

        ``document`` must be the current document or an updated version of it. When it
        is the current document, ``self`` is returned, not a copy.

        Args:
            document (SourceDocumentLike): Target document revision.

        Returns:
            Diagnostic: ``self``, or a copy whose primary location, and every related
                location in the same document, is mapped onto ``document``.

        Raises:
            ValueError: If ``document`` is neither the current document nor an updated
                version of it.
        """
        if document is self.location.document:
            return self
        old: SourceDocumentLike = self.location.document
        if not document.is_updated_version_of(old):
            raise ValueError(f"{document!r} is not a revision of {old!r}")
        return Diagnostic(
            kind=self.kind,
            arguments=self.arguments,
            location=document.get_corresponding_location(self.location),
            related_locations=tuple(
                document.get_corresponding_location(loc) if loc.document is old else loc
                for loc in self.related_locations
            ),
        )

    def to_dict(self, localizer: Localizer | None = None) -> dict[str, Any]:
        """Return a JSON-friendly mapping describing this diagnostic."""
        payload: dict[str, Any] = {
            "reporter": self.reporter,
            "code": self.code,
            "kind": self.message_key,
            "severity": self.severity.value,
            "arguments": list(self.arguments),
            "message": self.render(localizer),
        }
        document: Any = self.location.document
        if getattr(document, "name", ""):
            payload["location"] = {
                "document": document.name,
                "line": getattr(self.location, "line", None),
                "column": getattr(self.location, "column", None),
            }
        return payload

    def __str__(self) -> str:
        return self.message
