from realestate_calc.data.stats import ListingStats
from realestate_calc.ui.components.formatting import format_currency, format_number
from realestate_calc.ui.components.kpi import stats_cards


def test_format_number():
    assert format_number(1234) == "1,234"
    assert format_number(None) == "–"
    assert format_number("x") == "–"


def test_format_currency_keeps_preformatted_strings():
    assert format_currency("1234567.50") == "$1234567.50"
    assert format_currency("") == "–"
    assert format_currency(None) == "–"


def test_format_currency_numbers():
    assert format_currency(12.5) == "$12.50"
    assert format_currency(3, symbol="€", decimals=0) == "€3"


def test_stats_cards_labels_and_values():
    cards = stats_cards(ListingStats("200.00", "300.00", "20.00"))
    assert [c.label for c in cards] == [
        "Average Price",
        "Median Price",
        "Average Price per Square Foot",
    ]
    assert [c.value_display for c in cards] == ["$200.00", "$300.00", "$20.00"]
