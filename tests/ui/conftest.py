"""Fixtures for driving board animations by hand."""

from __future__ import annotations

from collections.abc import Callable

import pytest


class _Signal:
    def __init__(self) -> None:
        self._callbacks: list[Callable[..., None]] = []

    def connect(self, cb: Callable[..., None]) -> None:
        self._callbacks.append(cb)

    def emit(self, *args: object) -> None:
        for cb in list(self._callbacks):
            cb(*args)


class FakeAnimation:
    """Stand-in for QVariantAnimation whose completion is triggered by the test."""

    def __init__(self, driver: AnimationDriver) -> None:
        self._driver = driver
        self.finished = _Signal()
        self.valueChanged = _Signal()
        self.duration: int | None = None
        self.start_value: object = None
        self.end_value: object = None
        self.easing: object = None
        self.started = False
        self.done = False

    def setDuration(self, value: int) -> None:
        self.duration = value

    def setStartValue(self, value: object) -> None:
        self.start_value = value

    def setEndValue(self, value: object) -> None:
        self.end_value = value

    def setEasingCurve(self, value: object) -> None:
        self.easing = value

    def start(self, _policy: object = None) -> None:
        self.started = True
        if self._driver.auto_finish:
            self.finish()

    def finish(self) -> None:
        self.done = True
        self.valueChanged.emit(self.end_value)
        self.finished.emit()


class AnimationDriver:
    """Records every animation created by MoveAnimator."""

    def __init__(self) -> None:
        self.instances: list[FakeAnimation] = []
        self.auto_finish = False

    def create(self, *_args: object, **_kwargs: object) -> FakeAnimation:
        anim = FakeAnimation(self)
        self.instances.append(anim)
        return anim

    @property
    def last(self) -> FakeAnimation:
        return self.instances[-1]

    def finish_all(self) -> None:
        for anim in list(self.instances):
            if anim.started and not anim.done:
                anim.finish()


@pytest.fixture
def animations(monkeypatch: pytest.MonkeyPatch) -> AnimationDriver:
    """Replace QVariantAnimation; animations finish only when the test says so."""
    driver = AnimationDriver()
    monkeypatch.setattr("chessgrid.ui.board.animator.QVariantAnimation", driver.create)
    return driver


@pytest.fixture
def instant_animations(animations: AnimationDriver) -> AnimationDriver:
    """Like ``animations`` but every slide completes as soon as it starts."""
    animations.auto_finish = True
    return animations
