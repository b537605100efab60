# topmark:header:start
#
#   project      : FrontOpts
#   file         : kinds.py
#   file_relpath : src/frontopts/diagnostic/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Catalog of diagnostic kinds reported by the front end.

The integer value of each `DiagnosticKind` is its public error code and the member name
is the key used to look up its localized message. External tools key off both, so the
catalog is append-only: never renumber, rename or remove a member, only add new ones at
the end.

Sections:
    * Severity: error/warning classification with terminal colors.
    * DiagnosticKind: the stable code catalog.
    * DEFAULT_TEMPLATES: built-in English message templates with ``{i}`` placeholders.
    * WARNING_KINDS / classify(): the fixed severity allow-list.
"""

from __future__ import annotations

import re
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

PLACEHOLDER_RE: Final[re.Pattern[str]] = re.compile(r"\{(\d+)\}")


class Severity(Enum):
    """Severity of a diagnostic.

    Severity is a property of the kind alone; whether a warning fails a build is
    decided by the host, not here.
    """

    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity.

        Intended for human-readable output only; machine formats should not use colors.
        """
        return cast(
            "Callable[[str], str]",
            {
                Severity.WARNING: chalk.yellow,
                Severity.ERROR: chalk.red_bright,
            }[self],
        )


class DiagnosticKind(IntEnum):
    """Every diagnostic the AST layer and the option parser can report."""

    NotAnError = 0
    AliasNotFound = 1
    AmbiguousCall = 2
    AssignmentLeftHandValueExpected = 3
    BadArgumentTypes = 4
    BadArgumentType = 5
    BadBinaryOperation = 6
    BadExternAlias = 7
    BadNumberOfArguments = 8
    BadReferenceCompareLeft = 9
    BadReferenceCompareRight = 10
    BadReturnType = 11
    BadUnaryOperation = 12
    BadUseOfSymbol = 13
    BatchFileNotRead = 14
    CannotCallNonMethod = 15
    CantInferMethTypeArgs = 16
    ConstInReadsOrWritesClause = 17
    ConstOutOfRange = 18
    ConstOutOfRangeChecked = 19
    DuplicateResponseFile = 20
    ExplicitSizeDoesNotMatchInitializer = 21
    ExpressionHasSideEffect = 22
    ExpressionStatementHasNoSideEffect = 23
    ExtensionMethodsOnlyInStaticClass = 24
    ExtensionMethodsOnlyInNonGenericClass = 25
    InaccessibleTypeMember = 26
    InitializerCountInconsistent = 27
    InvalidCodePage = 28
    InvalidCompilerOption = 29
    InvalidFileOrPath = 30
    IsBinaryFile = 31
    LabelNotFound = 32
    MustBeConstInt = 33
    NameNotInContext = 34
    NoExplicitConversion = 35
    NoImplicitConvCast = 36
    NoImplicitConversion = 37
    NoImplicitConversionForValue = 38
    NoMatchingOverload = 39
    NoSourceFiles = 40
    NoSuchFile = 41
    NoSuchMember = 42
    ObjectProhibited = 43
    ObjectRequired = 44
    OutParameterReferenceNotAllowedHere = 45
    PointerExpected = 46
    PotentialUnintendRangeComparison = 47
    SingleTypeNameNotFound = 48
    SourceFileNotRead = 49
    SourceFileTooLarge = 50
    CannotTakeAddress = 51
    CannotInferTypeOfConditional = 52
    CannotInferTypeOfConditionalDueToAmbiguity = 53
    UndefinedOperationOnVoidPointers = 54
    WrongNumberOfArgumentsInConstructorCall = 55
    IllegalUseOfType = 56
    TypeNameNotFound = 57
    ToBeDefined = 58

    @property
    def message_key(self) -> str:
        """Key under which a localizer stores this kind's message template."""
        return self.name

    @property
    def template(self) -> str:
        """Built-in English message template."""
        return DEFAULT_TEMPLATES[self]

    @property
    def placeholder_count(self) -> int:
        """Number of substitution arguments a diagnostic of this kind must carry."""
        return _PLACEHOLDER_COUNTS[self]

    @property
    def severity(self) -> Severity:
        """Fixed severity of this kind (see `classify`)."""
        return classify(self)


_K = DiagnosticKind

DEFAULT_TEMPLATES: Final[Mapping[DiagnosticKind, str]] = {
    _K.NotAnError: "",
    _K.AliasNotFound: "Alias '{0}' not found.",
    _K.AmbiguousCall: (
        "The call is ambiguous between the following methods or properties: '{0}' and '{1}'."
    ),
    _K.AssignmentLeftHandValueExpected: (
        "The left-hand side of an assignment must be a variable, property or indexer."
    ),
    _K.BadArgumentTypes: "The best overloaded method match for '{0}' has some invalid arguments.",
    _K.BadArgumentType: "Argument '{0}': cannot convert from '{1}' to '{2}'.",
    _K.BadBinaryOperation: "Operator '{0}' cannot be applied to operands of type '{1}' and '{2}'.",
    _K.BadExternAlias: "The extern alias '{0}' was not specified in a /reference option.",
    _K.BadNumberOfArguments: "No overload for method '{0}' takes '{1}' arguments.",
    _K.BadReferenceCompareLeft: (
        "Possible unintended reference comparison; to get a value comparison, "
        "cast the left hand side to type '{0}'."
    ),
    _K.BadReferenceCompareRight: (
        "Possible unintended reference comparison; to get a value comparison, "
        "cast the right hand side to type '{0}'."
    ),
    _K.BadReturnType: "'{0}' has the wrong return type.",
    _K.BadUnaryOperation: "Operator '{0}' cannot be applied to operand of type '{1}'.",
    _K.BadUseOfSymbol: "'{0}' is a '{1}' but is used like a '{2}'.",
    _K.BatchFileNotRead: "Could not read option batch file '{0}'. {1}",
    _K.CannotCallNonMethod: "'{0}' is not a method and cannot be called.",
    _K.CantInferMethTypeArgs: (
        "The type arguments for method '{0}' cannot be inferred from the usage. "
        "Try specifying the type arguments explicitly."
    ),
    _K.ConstInReadsOrWritesClause: (
        "Constant value '{0}' in reads/writes clause is meaningless; "
        "this is probably not what you wanted."
    ),
    _K.ConstOutOfRange: "Constant value '{0}' cannot be converted to a '{1}'.",
    _K.ConstOutOfRangeChecked: (
        "Constant value '{0}' cannot be converted to a '{1}' (use 'unchecked' syntax to override)."
    ),
    _K.DuplicateResponseFile: "Response file '{0}' included multiple times.",
    _K.ExplicitSizeDoesNotMatchInitializer: (
        "Explicit array size {0} does not match array initializer dimension {1}."
    ),
    _K.ExpressionHasSideEffect: (
        "Evaluating this expression has the side effect of modifying memory, "
        "which is not permitted in this context."
    ),
    _K.ExpressionStatementHasNoSideEffect: (
        "The expression '{0}' has no side effect; expected operation with side effect."
    ),
    _K.ExtensionMethodsOnlyInStaticClass: (
        "Extension methods can only be defined on static, non-nested classes"
    ),
    _K.ExtensionMethodsOnlyInNonGenericClass: (
        "Extension methods can only be defined on static, non-generic classes"
    ),
    _K.InaccessibleTypeMember: "'{0}' is inaccessible due to its protection level.",
    _K.InitializerCountInconsistent: (
        "This initializer element count {1} is different from count {0} in first element."
    ),
    _K.InvalidCodePage: "Code page '{0}' is invalid or not installed.",
    _K.InvalidCompilerOption: "Invalid option: '{0}'.",
    _K.InvalidFileOrPath: "Error while accessing file or path '{0}' - {1}",
    _K.IsBinaryFile: "'{0}' is a binary file instead of a source code file.",
    _K.LabelNotFound: "Label '{0}' can not be found within the scope of the goto statement.",
    _K.MustBeConstInt: "Array sizes must be int32 constants if an initializer is supplied.",
    _K.NameNotInContext: "The name '{0}' does not exist in the current context.",
    _K.NoExplicitConversion: "Cannot convert type '{0}' to '{1}'.",
    _K.NoImplicitConvCast: (
        "Cannot implicitly convert type '{0}' to '{1}'. "
        "An explicit conversion exists (are you missing a cast?)"
    ),
    _K.NoImplicitConversion: "Cannot implicitly convert type '{0}' to '{1}'.",
    _K.NoImplicitConversionForValue: "Cannot implicitly convert value '{0}' to type '{1}'.",
    _K.NoMatchingOverload: "No overload for '{1}' matches delegate '{0}'.",
    _K.NoSourceFiles: "No source files to compile.",
    _K.NoSuchFile: "File '{0}' does not exist.",
    _K.NoSuchMember: "'{0}' does not contain a definition for '{1}'.",
    _K.ObjectProhibited: (
        "Static member '{0}' cannot be accessed with an instance reference; "
        "qualify it with a type name instead."
    ),
    _K.ObjectRequired: (
        "An object reference is required for the nonstatic field, method, or property '{0}'."
    ),
    _K.OutParameterReferenceNotAllowedHere: (
        "Reference to out parameter '{0}' not allowed in this context."
    ),
    _K.PointerExpected: "The * or -> operator must be applied to a pointer.",
    _K.PotentialUnintendRangeComparison: (
        "'{0}' probably does not express what you intended; use two conjoined conditions "
        "to express an interval or parenthesize the {1} comparison."
    ),
    _K.SingleTypeNameNotFound: (
        "The type or namespace name '{0}' could not be found "
        "(are you missing a using directive or an assembly reference?)"
    ),
    _K.SourceFileNotRead: "Source file '{0}' could not be read. {1}.",
    _K.SourceFileTooLarge: "Source file '{0}' is too large to be compiled.",
    _K.CannotTakeAddress: "Cannot take the address of the given expression.",
    _K.CannotInferTypeOfConditional: "Type of conditional expression cannot be determined.",
    _K.CannotInferTypeOfConditionalDueToAmbiguity: (
        "Type of conditional expression cannot be determined because there are implicit "
        "conversions between '{0}' and '{1}'; try adding an explicit cast to one of the arguments."
    ),
    _K.UndefinedOperationOnVoidPointers: "The operation in question is undefined on void pointers.",
    _K.WrongNumberOfArgumentsInConstructorCall: (
        "{0} does not contain a constructor with {1} arguments."
    ),
    _K.IllegalUseOfType: "'{0}' : illegal use of type '{1}'.",
    _K.TypeNameNotFound: (
        "The type or namespace name '{1}' does not exist in the namespace '{0}' "
        "(are you missing an assembly reference?)"
    ),
    _K.ToBeDefined: (
        "Not an actual error message, but a convenient place holder during development."
    ),
}

#: Kinds reported as warnings; everything else is an error.
WARNING_KINDS: Final[frozenset[DiagnosticKind]] = frozenset(
    {
        _K.BadReferenceCompareLeft,
        _K.BadReferenceCompareRight,
        _K.ConstInReadsOrWritesClause,
        _K.PotentialUnintendRangeComparison,
        _K.ExpressionStatementHasNoSideEffect,
    }
)


def placeholder_count(template: str) -> int:
    """Return one past the highest ``{i}`` index referenced by ``template``.

    Args:
        template (str): A message template.

    Returns:
        int: The number of positional arguments the template needs (0 if none).
    """
    indices: list[int] = [int(m.group(1)) for m in PLACEHOLDER_RE.finditer(template)]
    return max(indices) + 1 if indices else 0


_PLACEHOLDER_COUNTS: Final[dict[DiagnosticKind, int]] = {
    kind: placeholder_count(template) for kind, template in DEFAULT_TEMPLATES.items()
}


def classify(kind: DiagnosticKind) -> Severity:
    """Return the severity of ``kind``.

    Args:
        kind (DiagnosticKind): The diagnostic kind.

    Returns:
        Severity: ``Severity.WARNING`` for the kinds in `WARNING_KINDS`,
            ``Severity.ERROR`` otherwise.
    """
    return Severity.WARNING if kind in WARNING_KINDS else Severity.ERROR
