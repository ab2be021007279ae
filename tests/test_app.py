import pytest

from emartident.app import WARNING_TEXT, Application
from emartident.settings import AppSettings
from emartident.workspace import ConfirmDeleteState, Workspace, WorkspaceAction


def test_default_application():
    app = Application()
    assert [ws.name for ws in app.workspaces] == ["Welcome"]
    assert app.selected_workspace == 0
    assert app.show_last_workspace_delete_warning is False
    assert app.settings == AppSettings()


def test_add_workspace_numbers_from_one():
    app = Application()
    first = app.add_workspace()
    second = app.add_workspace()
    assert first.name == "Workspace1"
    assert second.name == "Workspace2"
    assert app.current is second
    assert app.selected_workspace == len(app.workspaces) - 1


def test_handle_action_add():
    app = Application()
    created = app.handle_action(WorkspaceAction.ADD_WORKSPACE)
    assert created is app.current
    assert len(app.workspaces) == 2


def test_handle_action_none():
    app = Application()
    assert app.handle_action(WorkspaceAction.NONE) is None
    assert len(app.workspaces) == 1


def test_select_workspace_resets_confirmation():
    app = Application()
    added = app.add_workspace()
    added.press_delete()
    app.select_workspace(0)
    chosen = app.select_workspace(1)
    assert chosen is added
    assert added.confirm_delete_state is ConfirmDeleteState.IDLE


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_select_workspace_out_of_range(index):
    app = Application()
    with pytest.raises(IndexError):
        app.select_workspace(index)


def test_delete_requires_two_clicks():
    app = Application()
    app.add_workspace()
    assert app.press_delete() is False
    assert len(app.workspaces) == 2
    assert app.press_delete() is True
    assert [ws.name for ws in app.workspaces] == ["Welcome"]
    assert app.selected_workspace == 0


def test_delete_middle_keeps_selection_in_range():
    app = Application()
    app.add_workspace()
    last = app.add_workspace()
    app.select_workspace(1)
    app.press_delete()
    app.press_delete()
    assert app.current is last
    assert len(app.workspaces) == 2


def test_last_workspace_is_not_deleted():
    app = Application()
    app.press_delete()
    assert app.press_delete() is False
    assert len(app.workspaces) == 1
    assert app.show_last_workspace_delete_warning is True
    assert app.current.confirm_delete_state is ConfirmDeleteState.IDLE


def test_dismiss_warning():
    app = Application()
    app.press_delete()
    app.press_delete()
    app.dismiss_warning()
    assert app.show_last_workspace_delete_warning is False
    assert WARNING_TEXT == "The last remaining workspace cannot be deleted."


def test_counter_keeps_growing_after_delete():
    app = Application()
    app.add_workspace()
    app.press_delete()
    app.press_delete()
    again = app.add_workspace()
    assert again.name == "Workspace2"


def test_empty_application_rejected():
    with pytest.raises(ValueError):
        Application(workspaces=[])


def test_selection_clamped_on_construction():
    app = Application(workspaces=[Workspace(name="a"), Workspace(name="b")], selected_workspace=9)
    assert app.selected_workspace == 1