# emartident

A small desktop front-end built around *workspaces*, using Tk (`tkinter`)
from the Python standard library. Each workspace has a side menu that
opens windows:

- **README**: a short information window. Its menu button toggles it open
  and closed.
- **Connect Sqlite Database**: fetches customer records as JSON from a
  local HTTP service (`http://localhost:3000/customers`). It shows the JSON
  pretty-printed (indented, keys sorted), lists the customers in a table and
  shows which customer was last selected ("Selected Customer ID: ...").
  It fetches once when first opened; the *Fetch Customer Data* button
  fetches again.
- **Test Window**: a plain window with its own *Close* button.

Only one customer window and one test window are open per workspace at a
time; pressing their menu button again leaves the existing window in place.
*Organize windows* cascades the open windows near the top-left of the main
window, and *Close all windows* closes every window of the current
workspace.

Workspaces can be added and deleted. Deleting takes two presses: the first
turns the button into "🗑 Are you sure?" and the second removes the
workspace. Switching workspaces cancels a pending confirmation. The last
workspace cannot be deleted; trying to do so shows the warning "The last
remaining workspace cannot be deleted."

## Installation

```
pip install .
```

The package has no dependencies beyond the Python standard library, but the
Python installation must include `tkinter`. It needs Python 3.10 or later.

## Running

```
emartident
```

This opens the main window (1024×800, titled "Application Title") with a
single workspace named `Welcome`. New workspaces are named `Workspace1`,
`Workspace2` and so on. Options:

- `--width N`, `--height N`: window size in pixels (positive integers).
- `--title TEXT`: window title.

The customer window expects a service on `localhost:3000` that answers
`GET /customers` with a JSON array of objects shaped like this:

```json
[
  {"CustomerID": 1, "CustomerName": "Alice Example", "Address": "1 Sample Street"}
]
```

If the service cannot be reached or answers with an error status, the
window shows the error message. If it returns something other than JSON, the
text is shown as received with a warning. If the JSON is valid but not a list
of such objects, the JSON is still shown and the table stays empty.

## What it does not do

- It does not open SQLite database files or talk to any database itself; it
  only reads the JSON that the HTTP service above returns. No such service is
  included.
- The fetch runs in the interface thread, so the window does not respond
  until the service answers or the request times out (10 seconds).
- Workspaces and open windows are not saved between runs.

## Using the model from Python

The state behind the windows works without the interface, which makes it
easy to script or test:

```python
from emartident.app import Application
from emartident.views import Customer, SqliteData

app = Application()
app.add_workspace()      # adds "Workspace1" and selects it
app.press_delete()       # first press asks for confirmation
app.press_delete()       # second press deletes it; returns True
app.select_workspace(0)

customer = Customer.from_json(
    {"CustomerID": 7, "CustomerName": "Bob Example", "Address": "2 Sample Road"}
)

view = SqliteData(fetcher=lambda: '[{"CustomerID": 7, "CustomerName": "Bob Example", "Address": "2 Sample Road"}]')
view.ensure_loaded()     # fetches once, through the given fetcher
view.select_customer(7)
print(view.selection_label)   # Selected Customer ID: 7
```

- `emartident.app.Application` holds the workspaces (`workspaces`,
  `current`, `select_workspace`, `press_delete`, `add_workspace`,
  `handle_action`, `dismiss_warning`).
- `emartident.workspace.Workspace` holds one workspace's windows
  (`toggle_info`, `open_sqlite_window`, `open_test_window`, `close_view`,
  `close_all_windows`, `press_delete`, `press_add`, `windows`).
- `emartident.views` has the window classes `Info`, `TestWindow` and
  `SqliteData`, the `Customer` record, and `fetch_customer_data(url, timeout)`,
  which raises `FetchError` on failure.
- `emartident.settings.AppSettings` carries the window corner rounding
  (`CornerRadius`).
- `emartident.gui.MainWindow` and `emartident.gui.main` are the Tk interface.

## Tests

```
pip install ".[test]"
pytest
```