"""The application state: its workspaces and the last-workspace warning."""

from __future__ import annotations

from dataclasses import dataclass, field

from emartident.settings import AppSettings
from emartident.workspace import Workspace, WorkspaceAction

WARNING_TEXT = "The last remaining workspace cannot be deleted."


def _initial_workspaces() -> list[Workspace]:
    return [Workspace(name="Welcome")]


@dataclass
class Application:
    """Holds the workspaces, which of them is selected, and shared settings."""

    workspaces: list[Workspace] = field(default_factory=_initial_workspaces)
    selected_workspace: int = 0
    show_last_workspace_delete_warning: bool = False
    next_workspace_id_counter: int = 1
    settings: AppSettings = field(default_factory=AppSettings)

    def __post_init__(self) -> None:
        if not self.workspaces:
            raise ValueError("an application needs at least one workspace")
        self._clamp_selection()

    def _clamp_selection(self) -> None:
        self.selected_workspace = max(0, min(self.selected_workspace, len(self.workspaces) - 1))

    @property
    def current(self) -> Workspace:
        """The selected workspace."""
        return self.workspaces[self.selected_workspace]

    def select_workspace(self, index: int) -> Workspace:
        """Select a workspace by position, dropping its pending delete."""
        if not 0 <= index < len(self.workspaces):
            raise IndexError(f"no workspace at position {index}")
        workspace = self.workspaces[index]
        workspace.reset_confirm_delete()
        self.selected_workspace = index
        return workspace

    def press_delete(self) -> bool:
        """Click the selected workspace's delete button; return whether it was removed.

        The last remaining workspace is never removed: its confirmation is
        reset and the warning is raised instead.
        """
        workspace = self.current
        if workspace.press_delete():
            return False
        if len(self.workspaces) > 1:
            del self.workspaces[self.selected_workspace]
            self._clamp_selection()
            return True
        workspace.reset_confirm_delete()
        self.show_last_workspace_delete_warning = True
        return False

    def add_workspace(self) -> Workspace:
        """Append a newly numbered workspace and select it."""
        workspace = Workspace(name=f"Workspace{self.next_workspace_id_counter}")
        self.workspaces.append(workspace)
        self.next_workspace_id_counter += 1
        self.selected_workspace = len(self.workspaces) - 1
        return workspace

    def handle_action(self, action: WorkspaceAction) -> Workspace | None:
        """Carry out an action a workspace requested; return any new workspace."""
        if action is WorkspaceAction.ADD_WORKSPACE:
            return self.add_workspace()
        if action is WorkspaceAction.NONE:
            return None
        raise ValueError(f"unknown workspace action: {action!r}")

    def dismiss_warning(self) -> None:
        """Close the last-workspace warning."""
        self.show_last_workspace_delete_warning = False