"""Desktop window showing the application's workspaces and their windows."""

from __future__ import annotations

import argparse
import tkinter as tk
from collections.abc import Callable
from tkinter import messagebox, ttk

from emartident.app import WARNING_TEXT, Application
from emartident.views import Customer, Info, SqliteData, TestWindow, View

APP_TITLE = "Application Title"
DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 800
_CASCADE_STEP = 30
_CASCADE_ORIGIN = 60


def format_customer_row(customer: Customer) -> tuple[str, str, str]:
    """Return the table cells for one customer: ID, name and address."""
    return (str(customer.customer_id), customer.customer_name, customer.address)


class MainWindow:
    """The main window: workspace tabs, a side menu and one toplevel per open view."""

    def __init__(self, root: tk.Tk, app: Application | None = None) -> None:
        self.root = root
        self.app = app if app is not None else Application()
        self._top_bar = ttk.Frame(root, padding=4)
        self._top_bar.pack(side=tk.TOP, fill=tk.X)
        ttk.Separator(root, orient=tk.HORIZONTAL).pack(side=tk.TOP, fill=tk.X)
        self._side = ttk.Frame(root, padding=5)
        self._side.pack(side=tk.LEFT, fill=tk.Y)
        ttk.Separator(root, orient=tk.VERTICAL).pack(side=tk.LEFT, fill=tk.Y)
        self._central = ttk.Frame(root)
        self._central.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self._toplevels: dict[int, tuple[View, tk.Toplevel]] = {}
        self._updaters: dict[int, Callable[[], None]] = {}
        self.refresh()

    def refresh(self) -> None:
        """Redraw the menus and bring the open windows in line with the state."""
        self._build_top_bar()
        self._build_side_panel()
        self._sync_windows()
        if self.app.show_last_workspace_delete_warning:
            self.app.dismiss_warning()
            messagebox.showwarning("Warning", WARNING_TEXT, parent=self.root)

    # -- menus -----------------------------------------------------------

    def _build_top_bar(self) -> None:
        for child in self._top_bar.winfo_children():
            child.destroy()
        for index, workspace in enumerate(self.app.workspaces):
            selected = index == self.app.selected_workspace
            tk.Button(
                self._top_bar,
                text=workspace.name,
                relief=tk.SUNKEN if selected else tk.FLAT,
                command=lambda i=index: self._on_select(i),
            ).pack(side=tk.LEFT, padx=2)

    def _build_side_panel(self) -> None:
        for child in self._side.winfo_children():
            child.destroy()
        workspace = self.app.current
        bold = ("TkDefaultFont", 10, "bold")

        ttk.Label(self._side, text="Current workspace", font=bold).pack(anchor=tk.W)
        ttk.Label(self._side, text=workspace.name, font=("TkDefaultFont", 14, "bold")).pack(
            anchor=tk.W
        )
        ttk.Separator(self._side).pack(fill=tk.X, pady=4)

        ttk.Label(self._side, text="Menu", font=bold).pack(anchor=tk.W)
        tk.Button(
            self._side,
            text=Info.window_title,
            relief=tk.SUNKEN if workspace.info is not None else tk.RAISED,
            command=self._on_toggle_info,
        ).pack(fill=tk.X, pady=1)
        ttk.Button(self._side, text=SqliteData.window_title, command=self._on_sqlite).pack(
            fill=tk.X, pady=1
        )
        ttk.Button(self._side, text=TestWindow.window_title, command=self._on_test).pack(
            fill=tk.X, pady=1
        )
        ttk.Separator(self._side).pack(fill=tk.X, pady=4)

        ttk.Label(self._side, text="Workspace", font=bold).pack(anchor=tk.W)
        delete_button = tk.Button(
            self._side, text=workspace.delete_button_label, command=self._on_delete
        )
        if workspace.delete_button_label != "🗑 Delete workspace":
            delete_button.configure(background="#ffa0a0")
        delete_button.pack(fill=tk.X, pady=1)
        ttk.Button(self._side, text="➕ Add workspace", command=self._on_add).pack(
            fill=tk.X, pady=1
        )
        ttk.Separator(self._side).pack(fill=tk.X, pady=4)

        ttk.Label(self._side, text="Windows", font=bold).pack(anchor=tk.W)
        ttk.Button(self._side, text="Organize windows", command=self._on_organize).pack(
            fill=tk.X, pady=1
        )
        ttk.Button(self._side, text="Close all windows", command=self._on_close_all).pack(
            fill=tk.X, pady=1
        )

    # -- menu handlers ---------------------------------------------------

    def _on_select(self, index: int) -> None:
        self.app.select_workspace(index)
        self.refresh()

    def _on_toggle_info(self) -> None:
        self.app.current.toggle_info()
        self.refresh()

    def _on_sqlite(self) -> None:
        self.app.current.open_sqlite_window()
        self.refresh()

    def _on_test(self) -> None:
        self.app.current.open_test_window()
        self.refresh()

    def _on_delete(self) -> None:
        self.app.press_delete()
        self.refresh()

    def _on_add(self) -> None:
        self.app.handle_action(self.app.current.press_add())
        self.refresh()

    def _on_organize(self) -> None:
        x0 = self.root.winfo_rootx() + _CASCADE_ORIGIN
        y0 = self.root.winfo_rooty() + _CASCADE_ORIGIN
        for step, (_, window) in enumerate(self._toplevels.values()):
            offset = step * _CASCADE_STEP
            window.geometry(f"+{x0 + offset}+{y0 + offset}")
            window.lift()

    def _on_close_all(self) -> None:
        self.app.current.close_all_windows()
        self.refresh()

    # -- windows ---------------------------------------------------------

    def _close_view(self, view: View) -> None:
        workspace = self.app.current
        if view is workspace.info:
            workspace.close_info()
        elif any(candidate is view for candidate in workspace.views):
            workspace.close_view(view)
        self.refresh()

    def _sync_windows(self) -> None:
        wanted = {id(view): view for view in self.app.current.windows()}
        for key in [key for key in self._toplevels if key not in wanted]:
            _, window = self._toplevels.pop(key)
            self._updaters.pop(key, None)
            window.destroy()
        for key, view in wanted.items():
            if key not in self._toplevels:
                self._toplevels[key] = (view, self._open_window(view))
        for updater in self._updaters.values():
            updater()

    def _open_window(self, view: View) -> tk.Toplevel:
        window = tk.Toplevel(self.root)
        window.title(view.title())
        window.protocol("WM_DELETE_WINDOW", lambda: self._close_view(view))
        body = ttk.Frame(window, padding=8, width=int(view.default_width))
        body.pack(fill=tk.BOTH, expand=True)
        if isinstance(view, SqliteData):
            self._fill_sqlite(body, view)
        elif isinstance(view, TestWindow):
            self._fill_test(body, view)
        elif isinstance(view, Info):
            self._fill_info(body, view)
        return window

    def _fill_info(self, body: ttk.Frame, view: Info) -> None:
        ttk.Label(body, text=view.heading, font=("TkDefaultFont", 14, "bold")).pack(anchor=tk.W)
        ttk.Separator(body).pack(fill=tk.X, pady=4)
        ttk.Label(body, text=view.text, wraplength=int(view.default_width)).pack(anchor=tk.W)

    def _fill_test(self, body: ttk.Frame, view: TestWindow) -> None:
        ttk.Label(body, text=view.heading, font=("TkDefaultFont", 14, "bold")).pack(anchor=tk.W)
        ttk.Separator(body).pack(fill=tk.X, pady=4)
        ttk.Label(body, text=view.text).pack(anchor=tk.W, pady=(0, 10))

        def on_close() -> None:
            view.press_close()
            if not view.resolve_open(True):
                self._close_view(view)

        ttk.Button(body, text="Close", command=on_close).pack(anchor=tk.E)

    def _fill_sqlite(self, body: ttk.Frame, view: SqliteData) -> None:
        ttk.Label(body, text=view.heading, font=("TkDefaultFont", 14, "bold")).pack(anchor=tk.W)
        ttk.Separator(body).pack(fill=tk.X, pady=4)

        error_var = tk.StringVar()
        selection_var = tk.StringVar()
        rows: dict[str, Customer] = {}

        ttk.Label(body, text="Raw JSON Data").pack(anchor=tk.W)
        raw_text = tk.Text(body, height=5, wrap=tk.NONE)
        raw_text.pack(fill=tk.X)
        ttk.Separator(body).pack(fill=tk.X, pady=4)

        ttk.Label(body, text="Customer Data Table").pack(anchor=tk.W)
        tree = ttk.Treeview(
            body, columns=("id", "name", "address"), show="headings", selectmode="browse"
        )
        for column, heading, width in (
            ("id", "Customer ID", 100),
            ("name", "Customer Name", 200),
            ("address", "Address", 200),
        ):
            tree.heading(column, text=heading)
            tree.column(column, width=width, minwidth=40)
        tree.pack(fill=tk.BOTH, expand=True)
        ttk.Separator(body).pack(fill=tk.X, pady=4)
        tk.Label(body, textvariable=selection_var, foreground="#64c864").pack(anchor=tk.W)

        def update() -> None:
            error_var.set(view.error_message or "")
            raw_text.delete("1.0", tk.END)
            raw_text.insert("1.0", view.customer_data_json or view.hint_text)
            tree.delete(*tree.get_children())
            rows.clear()
            for position, customer in enumerate(view.customers):
                iid = str(position)
                rows[iid] = customer
                tree.insert("", tk.END, iid=iid, values=format_customer_row(customer))
            selection_var.set(view.selection_label or "")

        def on_fetch() -> None:
            view.trigger_fetch()
            update()

        def on_pick(_event: tk.Event) -> None:
            for iid in tree.selection():
                customer = rows.get(iid)
                if customer is not None:
                    view.select_customer(customer.customer_id)
            selection_var.set(view.selection_label or "")

        fetch_button = ttk.Button(body, text="Fetch Customer Data", command=on_fetch)
        fetch_button.pack(anchor=tk.W, before=raw_text.master.winfo_children()[2])
        error_label = tk.Label(body, textvariable=error_var, foreground="red")
        error_label.pack(anchor=tk.W, after=fetch_button)
        tree.bind("<<TreeviewSelect>>", on_pick)

        view.ensure_loaded()
        self._updaters[id(view)] = update
        update()


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="emartident", description="Workspace-based customer data viewer."
    )
    parser.add_argument("--width", type=_positive_int, default=DEFAULT_WIDTH, help="window width")
    parser.add_argument(
        "--height", type=_positive_int, default=DEFAULT_HEIGHT, help="window height"
    )
    parser.add_argument("--title", default=APP_TITLE, help="window title")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Open the main window and run until it is closed."""
    args = _parser().parse_args(argv)
    root = tk.Tk()
    root.title(args.title)
    root.geometry(f"{args.width}x{args.height}")
    MainWindow(root)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())