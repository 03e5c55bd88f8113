"""Stable type name registry for message part kinds.

Stable type names are embedded in message fingerprints (and therefore in
message ids) and in the on-disk serialization of messages. The registry is
the single point enforcing that the set of known kinds and their names form
a stable, auditable vocabulary:

- one name per kind (no re-registration)
- one kind per name (no reuse)
- lookups by exact runtime type (subclasses do not inherit a name)

Registration happens once per kind at module import time and is never
undone. A registry may be frozen to refuse further registration; the
process-wide DEFAULT_REGISTRY stays open so extension kinds can register.

Thread Safety:
    Reads are safe once registration has completed. Registration itself is
    not safe to race and only happens at import time.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType

from i18nmodel.diagnostics import ErrorTemplate, StableTypeNameError

__all__ = [
    "DEFAULT_REGISTRY",
    "StableTypeRegistry",
    "get_stable_type_name",
    "register_stable_type_name",
    "stable_type",
]

logger = logging.getLogger(__name__)


class StableTypeRegistry:
    """Bidirectional, write-once table between part kinds and stable names.

    Example:
        >>> registry = StableTypeRegistry()
        >>> class Widget: ...
        >>> registry.register(Widget, "Widget")
        >>> registry.get_stable_type_name(Widget())
        'Widget'
    """

    __slots__ = ("_frozen", "_kinds_by_name", "_names_by_kind")

    def __init__(self) -> None:
        self._names_by_kind: dict[type, str] = {}
        self._kinds_by_name: dict[str, type] = {}
        self._frozen = False

    def register(self, kind: type, name: str) -> None:
        """Register name as the permanent stable identifier for kind.

        Args:
            kind: Concrete message part class
            name: Stable type name (persisted; never change once shipped)

        Raises:
            StableTypeNameError: If the registry is frozen, name is already
                registered by any kind, or kind already has a name
        """
        if self._frozen:
            raise StableTypeNameError(ErrorTemplate.registry_frozen(kind.__qualname__, name))
        if name in self._kinds_by_name:
            owner = self._kinds_by_name[name].__qualname__
            raise StableTypeNameError(ErrorTemplate.stable_type_name_reused(name, owner))
        if kind in self._names_by_kind:
            existing = self._names_by_kind[kind]
            raise StableTypeNameError(
                ErrorTemplate.kind_already_registered(kind.__qualname__, existing)
            )

        self._names_by_kind[kind] = name
        self._kinds_by_name[name] = kind
        logger.debug("Registered stable type name %s for %s", name, kind.__qualname__)

    def get_stable_type_name(self, part: object) -> str:
        """Stable type name of part's concrete kind.

        Raises:
            StableTypeNameError: If the kind was never registered
        """
        return self.name_for_kind(type(part))

    def name_for_kind(self, kind: type) -> str:
        """Stable type name registered for kind.

        Raises:
            StableTypeNameError: If the kind was never registered
        """
        try:
            return self._names_by_kind[kind]
        except KeyError:
            raise StableTypeNameError(
                ErrorTemplate.kind_not_registered(kind.__qualname__)
            ) from None

    def kind_for(self, name: str) -> type:
        """Kind registered under name (reverse lookup, used by deserializers).

        Raises:
            StableTypeNameError: If no kind registered name
        """
        try:
            return self._kinds_by_name[name]
        except KeyError:
            raise StableTypeNameError(ErrorTemplate.stable_type_name_unknown(name)) from None

    def freeze(self) -> None:
        """Refuse all further registration."""
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        """True once freeze() has been called."""
        return self._frozen

    def as_mapping(self) -> Mapping[type, str]:
        """Read-only view of kind to stable name."""
        return MappingProxyType(self._names_by_kind)

    def __contains__(self, kind: object) -> bool:
        return kind in self._names_by_kind

    def __len__(self) -> int:
        return len(self._names_by_kind)


# Process-wide registry populated by the built-in part kinds at import time.
DEFAULT_REGISTRY = StableTypeRegistry()


def register_stable_type_name(kind: type, name: str) -> None:
    """Register kind under name in DEFAULT_REGISTRY."""
    DEFAULT_REGISTRY.register(kind, name)


def get_stable_type_name(part: object) -> str:
    """Stable type name of part's concrete kind in DEFAULT_REGISTRY."""
    return DEFAULT_REGISTRY.get_stable_type_name(part)


def stable_type[C: type](
    name: str, *, registry: StableTypeRegistry | None = None
) -> Callable[[C], C]:
    """Class decorator registering the decorated kind under name.

    Example:
        >>> @stable_type("XmlTagPair")
        ... class XmlTagPair(TagPair): ...
    """

    def decorate(kind: C) -> C:
        (registry if registry is not None else DEFAULT_REGISTRY).register(kind, name)
        return kind

    return decorate
