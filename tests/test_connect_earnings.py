import pytest

from connect_earnings import aggregate_earnings, calculate_connect_earnings, find_column, resolve_columns
from csv_table import parse_csv
from errors import MissingColumnError


def test_totals_each_column_and_sums_them():
    result = calculate_connect_earnings("Payment Received,Payment Pending,Amount Bonused\n10,5,2\n3,0,1\n")

    assert (result.received, result.pending, result.bonused) == (13.0, 5.0, 3.0)
    assert result.total == 21.0
    assert result.rows == 2


@pytest.mark.parametrize(
    "header",
    [
        "Payment Received,Payment Pending,Amount Bonused",
        "paymentreceived,paymentpending,amountbonused",
        "PAYMENT RECEIVED,PAYMENT PENDING,AMOUNT BONUSED",
        '"Amount Bonused ($)","Payment Pending ($)","Payment Received ($)"',
    ],
)
def test_header_spelling_and_order_do_not_matter(header):
    headers = parse_csv(header, require_data=False).headers
    columns = resolve_columns(headers)

    assert "received" in headers[columns["received"]].lower().replace(" ", "")
    assert set(columns) == {"received", "pending", "bonused"}


def test_first_matching_header_wins():
    assert find_column(["Date", "Payment Received (USD)", "Payment Received (GBP)"], ["payment received"]) == 1
    assert find_column(["Date"], ["payment received"]) is None


def test_missing_column_raises_with_exact_message():
    with pytest.raises(MissingColumnError) as exc:
        calculate_connect_earnings("Payment Received,Payment Pending,Notes\n1,2,x")

    assert exc.value.missing == ("bonused",)
    assert exc.value.message == "CSV must contain columns: Payment Received, Payment Pending, Amount Bonused"
    assert exc.value.headers == ("Payment Received", "Payment Pending", "Notes")


def test_empty_file_reports_every_column_missing():
    with pytest.raises(MissingColumnError) as exc:
        calculate_connect_earnings("")

    assert exc.value.missing == ("received", "pending", "bonused")


def test_header_only_file_totals_zero():
    result = calculate_connect_earnings("Payment Received,Payment Pending,Amount Bonused")

    assert result.total == 0.0
    assert result.rows == 0


def test_unparsable_cells_count_as_zero():
    text = "Payment Received,Payment Pending,Amount Bonused\nN/A,,2.5\n$4,1.5 pending,abc\n"

    result = calculate_connect_earnings(text)

    assert (result.received, result.pending, result.bonused) == (0.0, 1.5, 2.5)
    assert result.total == 4.0


def test_blank_lines_are_kept_as_zero_rows():
    result = calculate_connect_earnings("Payment Received,Payment Pending,Amount Bonused\n1,1,1\n\n2,2,2")

    assert result.rows == 3
    assert result.total == 9.0


def test_short_rows_only_contribute_present_values():
    table = parse_csv("Payment Received,Payment Pending,Amount Bonused\n4", require_data=False)

    result = aggregate_earnings(table)

    assert (result.received, result.pending, result.bonused) == (4.0, 0.0, 0.0)


def test_recalculating_same_input_is_identical():
    text = "Payment Received,Payment Pending,Amount Bonused\n0.1,0.2,0.3\n0.7,0.1,0.2\n"

    assert calculate_connect_earnings(text) == calculate_connect_earnings(text)
