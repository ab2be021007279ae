import pytest

from emartident.gui import format_customer_row, main
from emartident.views import Customer


def test_format_customer_row_orders_id_name_address():
    customer = Customer(customer_name="Ann", address="1 Main St", customer_id=7)
    assert format_customer_row(customer) == ("7", "Ann", "1 Main St")


@pytest.mark.parametrize("customer_id", [0, -5, 2**63 - 1])
def test_format_customer_row_id_is_decimal_text(customer_id):
    customer = Customer(customer_name="Bob", address="Elm", customer_id=customer_id)
    row = format_customer_row(customer)
    assert int(row[0]) == customer_id
    assert len(row) == 3


def test_format_customer_row_from_json_round_trip():
    customer = Customer.from_json({"CustomerName": "Çağla", "Address": "İzmir", "CustomerID": 3})
    assert format_customer_row(customer) == ("3", "Çağla", "İzmir")


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "--width" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [["--width", "0"], ["--height", "-3"], ["--width", "wide"], ["--unknown"]],
)
def test_main_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2