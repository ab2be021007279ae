"""The windows a workspace can open and the state behind each of them."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar

CUSTOMERS_URL = "http://localhost:3000/customers"
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class View:
    """Base class of a window shown inside a workspace."""

    window_title: ClassVar[str] = ""
    default_width: ClassVar[float] = 320.0

    def title(self) -> str:
        """Return the window's title, which also identifies its kind."""
        return self.window_title


class Info(View):
    """The read-me window describing the application."""

    window_title: ClassVar[str] = "README"
    default_width: ClassVar[float] = 320.0
    heading: ClassVar[str] = "Info"
    text: ClassVar[str] = (
        "This is a demo application. It is intended to be a simple example "
        "of a workspace-based desktop interface."
    )


@dataclass(eq=False)
class TestWindow(View):
    """A simple window that can close itself through its own button."""

    __test__ = False

    window_title: ClassVar[str] = "Test Window"
    default_width: ClassVar[float] = 320.0
    heading: ClassVar[str] = "Test Window"
    text: ClassVar[str] = "This is a test window with a special label."

    close_button_pressed: bool = False

    def press_close(self) -> None:
        """Record a click on the window's Close button."""
        self.close_button_pressed = True

    def resolve_open(self, open: bool) -> bool:
        """Return whether the window stays open after this frame.

        A pressed Close button wins over the frame's own open state; the
        press is consumed either way.
        """
        pressed = self.close_button_pressed
        self.close_button_pressed = False
        return False if pressed else open


class FetchError(Exception):
    """Raised when customer data cannot be retrieved from the server."""


@dataclass(frozen=True)
class Customer:
    """One customer record as delivered by the server."""

    customer_name: str
    address: str
    customer_id: int

    @classmethod
    def from_json(cls, data: Any) -> Customer:
        """Build a customer from a decoded JSON object with PascalCase keys."""
        if not isinstance(data, dict):
            raise ValueError(f"invalid type: expected a customer object, got {type(data).__name__}")
        strings = {}
        for key in ("CustomerName", "Address"):
            if key not in data:
                raise ValueError(f"missing field `{key}`")
            if not isinstance(data[key], str):
                raise ValueError(f"invalid type for `{key}`: expected a string")
            strings[key] = data[key]
        if "CustomerID" not in data:
            raise ValueError("missing field `CustomerID`")
        customer_id = data["CustomerID"]
        if isinstance(customer_id, bool) or not isinstance(customer_id, int):
            raise ValueError("invalid type for `CustomerID`: expected an integer")
        if not _I64_MIN <= customer_id <= _I64_MAX:
            raise ValueError(f"`CustomerID` out of range: {customer_id}")
        return cls(
            customer_name=strings["CustomerName"],
            address=strings["Address"],
            customer_id=customer_id,
        )


def fetch_customer_data(url: str = CUSTOMERS_URL, timeout: float = 10.0) -> str:
    """Fetch the raw customer listing from the server and return its text."""
    try:
        with urllib.request.urlopen(url, timeout=timeout) as response:
            body = response.read()
            charset = response.headers.get_content_charset() or "utf-8"
    except urllib.error.HTTPError as exc:
        raise FetchError(f"Request failed with status: {exc.code} {exc.reason}") from exc
    except urllib.error.URLError as exc:
        raise FetchError(f"HTTP request failed: {exc.reason}") from exc
    except OSError as exc:
        raise FetchError(f"HTTP request failed: {exc}") from exc
    try:
        return body.decode(charset)
    except (UnicodeDecodeError, LookupError) as exc:
        raise FetchError(f"Failed to read response text: {exc}") from exc


@dataclass(eq=False)
class SqliteData(View):
    """The customer table window, loading its data from the server."""

    window_title: ClassVar[str] = "Connect Sqlite Database"
    default_width: ClassVar[float] = 480.0
    heading: ClassVar[str] = "Customer Data from Server"
    hint_text: ClassVar[str] = (
        f"Click 'Fetch Customer Data' to load data from {CUSTOMERS_URL}"
    )

    fetcher: Callable[[], str] = field(default=fetch_customer_data, repr=False)
    customer_data_json: str = ""
    error_message: str | None = None
    customers: list[Customer] = field(default_factory=list)
    selected_customer_id: int | None = None
    data_fetched_on_open: bool = False

    def process_fetched_json(self, raw_json: str) -> None:
        """Store fetched text, pretty-printed if it is JSON, and parse customers."""
        try:
            parsed = json.loads(raw_json)
        except json.JSONDecodeError:
            self.customer_data_json = raw_json
            self.customers.clear()
            self.error_message = "Warning: Fetched data is not valid JSON."
            return

        self.customer_data_json = json.dumps(
            parsed, indent=2, sort_keys=True, ensure_ascii=False
        )
        try:
            if not isinstance(parsed, list):
                raise ValueError(
                    f"invalid type: expected a sequence, got {type(parsed).__name__}"
                )
            customers = [Customer.from_json(item) for item in parsed]
        except ValueError as exc:
            self.customers.clear()
            self.error_message = f"Warning: Could not parse JSON into Customer list: {exc}"
            return
        self.customers = customers

    def record_error(self, message: str) -> None:
        """Remember a failure message to show in the window."""
        self.error_message = message

    def trigger_fetch(self) -> None:
        """Clear current data and load it afresh from the fetcher."""
        self.error_message = None
        self.customer_data_json = ""
        self.customers.clear()
        try:
            raw_json = self.fetcher()
        except FetchError as exc:
            self.record_error(str(exc))
        else:
            self.process_fetched_json(raw_json)
        self.data_fetched_on_open = True

    def ensure_loaded(self) -> bool:
        """Fetch once when the window first opens; return whether it fetched."""
        if self.data_fetched_on_open or self.customers:
            return False
        self.trigger_fetch()
        return True

    def select_customer(self, customer_id: int) -> None:
        """Mark a listed customer as the selected one."""
        if all(customer.customer_id != customer_id for customer in self.customers):
            raise ValueError(f"no customer with ID {customer_id}")
        self.selected_customer_id = customer_id

    @property
    def selection_label(self) -> str | None:
        """Text describing the selected customer, if any."""
        if self.selected_customer_id is None:
            return None
        return f"Selected Customer ID: {self.selected_customer_id}"