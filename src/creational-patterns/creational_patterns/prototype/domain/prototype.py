"""Prototype base class — clone() with a recoverable failure path."""

from typing import Self

from creational_patterns.prototype.domain.errors import CloneNotSupportedError
from creational_patterns.prototype.domain.observer import PrototypeObserver


class Prototype:
    """Base for objects copied from a fully configured template.

    Subclasses opt in to cloning by overriding _copy() with an explicit
    field-by-field copy. Types that do not override it cannot be cloned:
    clone() reports the failure to the observer and returns None instead of
    raising.
    """

    def __init__(self, observer: PrototypeObserver) -> None:
        self._observer = observer

    def clone(self) -> Self | None:
        try:
            return self._copy()
        except CloneNotSupportedError as exc:
            self._observer.clone_failed(prototype=exc.prototype, reason=str(exc))
            return None

    def _copy(self) -> Self:
        raise CloneNotSupportedError(prototype=type(self).__name__)
