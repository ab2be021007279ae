"""A workspace: a named set of open windows and its delete confirmation."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, TypeVar

from emartident.views import Info, SqliteData, TestWindow, View

_V = TypeVar("_V", bound=View)


class ConfirmDeleteState(enum.Enum):
    """Whether the delete button is waiting for a second, confirming click."""

    IDLE = enum.auto()
    PENDING = enum.auto()


class WorkspaceAction(enum.Enum):
    """What a workspace asks the application to do after a frame."""

    NONE = enum.auto()
    ADD_WORKSPACE = enum.auto()


@dataclass(eq=False)
class Workspace:
    """A named workspace holding the read-me window and other open views."""

    name: str = "Workspace"
    confirm_delete_state: ConfirmDeleteState = ConfirmDeleteState.IDLE
    info: Info | None = None
    views: list[View] = field(default_factory=list)
    sqlite_factory: Callable[[], SqliteData] = field(default=SqliteData, repr=False)

    @property
    def delete_button_label(self) -> str:
        """Text of the delete button in its current state."""
        if self.confirm_delete_state is ConfirmDeleteState.PENDING:
            return "🗑 Are you sure?"
        return "🗑 Delete workspace"

    def toggle_info(self) -> None:
        """Open the read-me window if it is closed, close it if it is open."""
        self.info = Info() if self.info is None else None

    def close_info(self) -> None:
        """Close the read-me window."""
        self.info = None

    def _open_once(self, kind: type[_V], factory: Callable[[], _V]) -> _V:
        for view in self.views:
            if view.title() == kind.window_title:
                return view  # type: ignore[return-value]
        view = factory()
        self.views.append(view)
        return view

    def open_sqlite_window(self) -> SqliteData:
        """Open the customer window unless one is open already; return it."""
        return self._open_once(SqliteData, self.sqlite_factory)

    def open_test_window(self) -> TestWindow:
        """Open the test window unless one is open already; return it."""
        return self._open_once(TestWindow, TestWindow)

    def close_view(self, view: View) -> None:
        """Close one open view."""
        for position, candidate in enumerate(self.views):
            if candidate is view:
                del self.views[position]
                return
        raise ValueError(f"window {view.title()!r} is not open in this workspace")

    def close_all_windows(self) -> None:
        """Close the read-me window and every other view."""
        self.info = None
        self.views.clear()

    def press_delete(self) -> bool:
        """Handle a click on the delete button.

        The first click asks for confirmation; the second requests deletion.
        Return whether the workspace stays open.
        """
        if self.confirm_delete_state is ConfirmDeleteState.IDLE:
            self.confirm_delete_state = ConfirmDeleteState.PENDING
            return True
        return False

    def press_add(self) -> WorkspaceAction:
        """Handle a click on the add-workspace button."""
        return WorkspaceAction.ADD_WORKSPACE

    def reset_confirm_delete(self) -> None:
        """Drop any pending delete confirmation."""
        self.confirm_delete_state = ConfirmDeleteState.IDLE

    def windows(self) -> list[View]:
        """Return every open window, the read-me window first."""
        opened: list[View] = [] if self.info is None else [self.info]
        opened.extend(self.views)
        return opened