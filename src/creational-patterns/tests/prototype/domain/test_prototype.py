"""Tests for the Prototype base class and its recoverable clone failure."""

from creational_patterns.core.errors import CreationalPatternsError
from creational_patterns.prototype.domain.errors import CloneNotSupportedError
from creational_patterns.prototype.domain.prototype import Prototype
from tests.prototype.fake_observer import CloneFailedEvent, FakePrototypeObserver


class _Badge(Prototype):
    """A prototype type that never opted in to copying."""


class TestCloneNotSupported:
    def test_clone_returns_none(self) -> None:
        badge = _Badge(observer=FakePrototypeObserver())

        assert badge.clone() is None

    def test_clone_failure_is_reported(self) -> None:
        observer = FakePrototypeObserver()

        _Badge(observer=observer).clone()

        assert observer.clone_failures == [
            CloneFailedEvent(
                prototype="_Badge",
                reason="Failed to clone _Badge: copying is not supported",
            )
        ]


class TestCloneNotSupportedError:
    def test_is_creational_patterns_error(self) -> None:
        error = CloneNotSupportedError(prototype="X")

        assert isinstance(error, CreationalPatternsError)

    def test_message_starts_with_failed(self) -> None:
        assert str(CloneNotSupportedError(prototype="X")).startswith("Failed to ")
