"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every error case in one place.
    """

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    @staticmethod
    def stable_type_name_reused(name: str, owner: str) -> Diagnostic:
        """Stable type name already claimed by another kind.

        Args:
            name: The stable type name being registered
            owner: Class name of the kind that already owns the name

        Returns:
            Diagnostic for STABLE_TYPE_NAME_REUSED
        """
        msg = f"Attempting to reuse stable type name '{name}' (owned by {owner})"
        return Diagnostic(
            code=DiagnosticCode.STABLE_TYPE_NAME_REUSED,
            message=msg,
            hint="Stable type names are persisted; pick a new, never used name",
            subject=name,
        )

    @staticmethod
    def kind_already_registered(kind: str, existing: str) -> Diagnostic:
        """Kind re-registered under a second name."""
        msg = f"Trying to re-register stable type name for kind '{kind}' (already '{existing}')"
        return Diagnostic(
            code=DiagnosticCode.KIND_ALREADY_REGISTERED,
            message=msg,
            hint="Each kind is registered exactly once, at module import time",
            subject=kind,
        )

    @staticmethod
    def kind_not_registered(kind: str) -> Diagnostic:
        """Lookup for a kind that never registered a stable type name."""
        msg = f"No stable type name registered for kind '{kind}'"
        return Diagnostic(
            code=DiagnosticCode.KIND_NOT_REGISTERED,
            message=msg,
            hint="Register the kind with register_stable_type_name() after its class body",
            subject=kind,
        )

    @staticmethod
    def registry_frozen(kind: str, name: str) -> Diagnostic:
        """Registration attempted on a frozen registry."""
        msg = f"Cannot register '{name}' for kind '{kind}': registry is frozen"
        return Diagnostic(
            code=DiagnosticCode.REGISTRY_FROZEN,
            message=msg,
            hint="Frozen registries only serve lookups; register kinds before freeze()",
            subject=kind,
        )

    @staticmethod
    def stable_type_name_unknown(name: str) -> Diagnostic:
        """Reverse lookup for a name no kind has registered."""
        msg = f"Unknown stable type name '{name}'"
        return Diagnostic(
            code=DiagnosticCode.STABLE_TYPE_NAME_UNKNOWN,
            message=msg,
            subject=name,
        )

    # ------------------------------------------------------------------
    # Fingerprints
    # ------------------------------------------------------------------

    @staticmethod
    def fingerprint_unimplemented(kind: str) -> Diagnostic:
        """Base placeholder kind reached fingerprinting."""
        msg = f"{kind}.to_long_fingerprint() is abstract"
        return Diagnostic(
            code=DiagnosticCode.FINGERPRINT_UNIMPLEMENTED,
            message=msg,
            hint="You must use a subclass that overrides this method",
            subject=kind,
        )

    @staticmethod
    def message_part_unsupported(kind: str) -> Diagnostic:
        """Object that is not a message part passed where one is required."""
        msg = f"Object of type '{kind}' is not a message part"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_PART_UNSUPPORTED,
            message=msg,
            hint="Message parts are TextPart, placeholders, and tag pairs",
            subject=kind,
        )

    # ------------------------------------------------------------------
    # Naming
    # ------------------------------------------------------------------

    @staticmethod
    def tag_pair_kind_unsupported(type_name: str) -> Diagnostic:
        """Tag-pair kind without a naming scheme reached hint resolution."""
        msg = f'Placeholder hints for tags of type "{type_name}" are not yet implemented'
        return Diagnostic(
            code=DiagnosticCode.TAG_PAIR_KIND_UNSUPPORTED,
            message=msg,
            hint="Add an explicit naming rule for the new tag-pair kind",
            subject=type_name,
        )

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @staticmethod
    def tag_pair_ref_shared(ref_text: str) -> Diagnostic:
        """Tag-pair ref already owned by another pair."""
        msg = f"Placeholder ref {ref_text!r} already belongs to another tag pair"
        return Diagnostic(
            code=DiagnosticCode.TAG_PAIR_REF_SHARED,
            message=msg,
            hint="Build tag pairs with new_for_parsing() so each owns fresh refs",
            subject=ref_text,
        )

    @staticmethod
    def tag_pair_ref_orphaned(ref_text: str) -> Diagnostic:
        """Tag-pair ref reached naming without an owning pair."""
        msg = f"Placeholder ref {ref_text!r} does not belong to any tag pair"
        return Diagnostic(
            code=DiagnosticCode.TAG_PAIR_REF_ORPHANED,
            message=msg,
            hint="Build tag pairs with new_for_parsing() so each owns fresh refs",
            subject=ref_text,
        )

    @staticmethod
    def placeholder_name_missing(text: str) -> Diagnostic:
        """Placeholder reachable from parts has no resolved name."""
        msg = f"Placeholder {text!r} has no resolved name"
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_NAME_MISSING,
            message=msg,
            hint="Run the naming pass before assembling the message",
            subject=text,
        )

    @staticmethod
    def placeholder_name_duplicate(name: str) -> Diagnostic:
        """Two distinct placeholders share one name."""
        msg = f"Placeholder name '{name}' is used by more than one placeholder"
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_NAME_DUPLICATE,
            message=msg,
            subject=name,
        )

    @staticmethod
    def placeholders_map_mismatch(name: str, reason: str) -> Diagnostic:
        """Placeholders map disagrees with the parts tree."""
        msg = f"Placeholders map entry '{name}' {reason}"
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDERS_MAP_MISMATCH,
            message=msg,
            hint="Map values must be the same objects reachable from parts",
            subject=name,
        )

    @staticmethod
    def max_depth_exceeded(max_depth: int) -> Diagnostic:
        """Tag-pair nesting deeper than the configured limit."""
        msg = f"Maximum tag-pair nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Check the parser output for runaway nesting",
        )
