# topmark:header:start
#
#   project      : WarnBox
#   file         : test_presenter.py
#   file_relpath : tests/api/test_presenter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the display presenter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from warnbox.core.category import WarningEvent
from warnbox.presenter import WarningPresenter

if TYPE_CHECKING:
    from tests.conftest import SnapshotRecorder
    from warnbox.core.registry import WarningRegistry


def test_mount_receives_current_snapshot(registry: WarningRegistry) -> None:
    """Mounting delivers the existing state immediately."""
    registry.add(WarningEvent(args=("Warning: early",)))
    presenter = WarningPresenter(registry)

    presenter.mount()

    assert presenter.mounted
    assert presenter.visible
    assert presenter.snapshot is not None
    assert list(presenter.snapshot) == ["Warning: early"]


def test_mount_is_idempotent(registry: WarningRegistry, recorder: SnapshotRecorder) -> None:
    """A second mount does not add a second subscription."""
    presenter = WarningPresenter(registry, on_change=recorder)
    presenter.mount()
    presenter.mount()

    registry.add(WarningEvent(args=("x",)))

    assert len(recorder.snapshots) == 2


def test_dismiss_and_dismiss_all(registry: WarningRegistry) -> None:
    """Dismiss actions delete from the registry and update the presenter."""
    presenter = WarningPresenter(registry)
    presenter.mount()
    for key in ("a", "b", "c"):
        registry.add(WarningEvent(args=(key,)))
    assert presenter.snapshot is not None

    presenter.dismiss(presenter.snapshot["b"])
    assert list(presenter.snapshot) == ["a", "c"]

    presenter.dismiss_all()
    assert presenter.snapshot == {}
    assert not presenter.visible


def test_unmount_stops_updates_and_keeps_last(registry: WarningRegistry) -> None:
    """After unmount the presenter keeps its last snapshot and receives nothing."""
    presenter = WarningPresenter(registry)
    presenter.mount()
    registry.add(WarningEvent(args=("kept",)))

    presenter.unmount()
    presenter.unmount()
    registry.add(WarningEvent(args=("missed",)))

    assert not presenter.mounted
    assert presenter.snapshot is not None
    assert list(presenter.snapshot) == ["kept"]


def test_disabled_registry_hides_display(registry: WarningRegistry) -> None:
    """While disabled the presenter holds None and is not visible."""
    presenter = WarningPresenter(registry)
    presenter.mount()
    registry.add(WarningEvent(args=("x",)))

    registry.set_disabled(True)

    assert presenter.snapshot is None
    assert not presenter.visible
    assert presenter.render(enable_color=False) == ""


def test_render_uses_latest_snapshot(registry: WarningRegistry) -> None:
    """Rendering reflects the latest delivered snapshot."""
    presenter = WarningPresenter(registry)
    presenter.mount()
    registry.add(WarningEvent(args=("Warning: %s", "a")))
    registry.add(WarningEvent(args=("Warning: %s", "b")))

    assert presenter.render(enable_color=False) == "(2) Warning: b"
