"""Unit tests for ConversionQuery model."""

import pytest

from models.requests import ConversionQuery, InvalidRequestError


def test_from_payload() -> None:
    """Test construction from complete request body."""
    query = ConversionQuery.from_payload(
        {"amount": 50, "from": "USD", "to": "JPY", "convertedAmount": "7500"}
    )
    assert query.amount == 50
    assert query.source == "USD"
    assert query.target == "JPY"
    assert query.converted_amount == "7500"


def test_constructor_by_field_name() -> None:
    """Test construction using Python field names."""
    query = ConversionQuery(source="EUR", target="CZK", amount=12.5)
    assert query.source == "EUR"
    assert query.target == "CZK"
    assert query.amount == 12.5
    assert query.converted_amount == "1000"


@pytest.mark.parametrize("amount", [None, 0, "", 0.0])
def test_default_amount(amount) -> None:
    """Test that missing or falsy amount is replaced by default."""
    query = ConversionQuery.from_payload({"amount": amount, "from": "USD", "to": "JPY"})
    assert query.amount == 1


def test_missing_amount() -> None:
    """Test that absent amount is replaced by default."""
    query = ConversionQuery.from_payload({"from": "USD", "to": "JPY"})
    assert query.amount == 1


@pytest.mark.parametrize("converted_amount", [None, "", 0])
def test_default_converted_amount(converted_amount) -> None:
    """Test that missing or falsy converted amount is replaced by default."""
    query = ConversionQuery.from_payload(
        {"from": "USD", "to": "JPY", "convertedAmount": converted_amount}
    )
    assert query.converted_amount == "1000"


def test_numeric_converted_amount() -> None:
    """Test that numeric converted amount is accepted as text."""
    query = ConversionQuery.from_payload(
        {"from": "USD", "to": "JPY", "convertedAmount": 7500.5}
    )
    assert query.converted_amount == "7500.5"


def test_integral_float_amount() -> None:
    """Test that integral amounts are rendered without decimal part."""
    query = ConversionQuery.from_payload({"amount": 50.0, "from": "USD", "to": "JPY"})
    assert query.amount == 50
    assert isinstance(query.amount, int)


def test_fractional_amount() -> None:
    """Test that fractional amounts are kept."""
    query = ConversionQuery.from_payload({"amount": 12.75, "from": "USD", "to": "JPY"})
    assert query.amount == 12.75


def test_query_is_immutable() -> None:
    """Test that query can not be changed once validated."""
    query = ConversionQuery.from_payload({"from": "USD", "to": "JPY"})
    with pytest.raises(ValueError):
        query.source = "EUR"


def test_unknown_fields_are_ignored() -> None:
    """Test that additional fields sent by UI are ignored."""
    query = ConversionQuery.from_payload({"from": "USD", "to": "JPY", "foo": "bar"})
    assert query.source == "USD"


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"to": "JPY"},
        {"from": "USD"},
        {"from": None, "to": "JPY"},
        {"from": "USD", "to": 42},
        {"from": ["USD"], "to": "JPY"},
        {"from": "", "to": "JPY"},
    ],
)
def test_missing_currency_data(payload) -> None:
    """Test that missing or non-string currency codes are rejected."""
    with pytest.raises(InvalidRequestError, match="Missing currency data"):
        ConversionQuery.from_payload(payload)


@pytest.mark.parametrize("payload", [None, [], "USD", 42])
def test_payload_is_not_object(payload) -> None:
    """Test that request body which is not an object is treated as empty."""
    with pytest.raises(InvalidRequestError, match="Missing currency data"):
        ConversionQuery.from_payload(payload)


def test_invalid_amount() -> None:
    """Test that amount which is not a number is rejected."""
    with pytest.raises(InvalidRequestError, match="Invalid amount"):
        ConversionQuery.from_payload({"amount": "lots", "from": "USD", "to": "JPY"})


def test_prompt() -> None:
    """Test that the prompt contains all values of the query."""
    query = ConversionQuery.from_payload(
        {"amount": 50, "from": "USD", "to": "JPY", "convertedAmount": "7500"}
    )
    prompt = query.prompt()
    assert prompt.startswith("Act as a local travel expert for 50 USD → 7500 JPY.")
    assert '"headline": "3-5 word catchy summary"' in prompt
    assert '"foods": ["food1", "food2", "food3"]' in prompt
    assert prompt.endswith("Keep everything short, fast to read, and valid JSON only.")
    assert "None" not in prompt


def test_prompt_with_defaults() -> None:
    """Test that the prompt does not contain empty placeholders."""
    query = ConversionQuery.from_payload({"from": "USD", "to": "JPY"})
    assert query.prompt().startswith(
        "Act as a local travel expert for 1 USD → 1000 JPY."
    )
