"""Models for REST API requests."""

from typing import Any, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    constr,
    field_validator,
    model_validator,
)

import constants
from log import get_logger

logger = get_logger(__name__)

CurrencyCode = constr(strict=True, min_length=1)


class InvalidRequestError(Exception):
    """Request sent by the client is missing mandatory data or is malformed."""


class ConversionQuery(BaseModel):
    """Model representing a request for travel insights.

    Attributes:
        amount: Amount in source currency, 1 when missing or zero.
        source: Source currency code, sent as `from`.
        target: Target currency code, sent as `to`.
        converted_amount: Converted amount as displayed by the UI, sent as
            `convertedAmount`, "1000" when missing or empty.

    Example:
        ```python
        query = ConversionQuery.from_payload(
            {"amount": 50, "from": "USD", "to": "JPY", "convertedAmount": "7500"}
        )
        ```
    """

    amount: int | float = Field(
        default=constants.DEFAULT_AMOUNT,
        description="Amount in source currency",
        examples=[50],
    )
    source: CurrencyCode = Field(  # type: ignore
        alias="from",
        description="Source currency code",
        examples=["USD"],
    )
    target: CurrencyCode = Field(  # type: ignore
        alias="to",
        description="Target currency code",
        examples=["JPY"],
    )
    converted_amount: str = Field(
        default=constants.DEFAULT_CONVERTED_AMOUNT,
        alias="convertedAmount",
        description="Converted amount as displayed by the UI",
        examples=["7500"],
    )

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "examples": [
                {
                    "amount": 50,
                    "from": "USD",
                    "to": "JPY",
                    "convertedAmount": "7500",
                },
            ]
        },
    )

    @model_validator(mode="before")
    @classmethod
    def resolve_defaults(cls, data: Any) -> Any:
        """Replace falsy optional values by defaults.

        Keeps the prompt free of empty placeholders and the cache key stable
        when the client omits optional fields.
        """
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if not data.get("amount"):
            data["amount"] = constants.DEFAULT_AMOUNT
        converted_amount = data.get("convertedAmount")
        if not converted_amount:
            data["convertedAmount"] = constants.DEFAULT_CONVERTED_AMOUNT
        elif isinstance(converted_amount, (int, float)) and not isinstance(
            converted_amount, bool
        ):
            data["convertedAmount"] = str(converted_amount)
        return data

    @field_validator("amount")
    @classmethod
    def normalize_amount(cls, value: int | float) -> int | float:
        """Render integral amounts without decimal part (50.0 -> 50)."""
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    @classmethod
    def from_payload(cls, payload: Any) -> Self:
        """Validate the request body and construct the query.

        Raises:
            InvalidRequestError: If the currency codes are missing or not
                strings, or if the amount is not a number.
        """
        if not isinstance(payload, dict):
            payload = {}
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            logger.debug("Invalid insights request: %s", e)
            fields = {err["loc"][0] for err in e.errors() if err["loc"]}
            if fields & {"from", "to"}:
                raise InvalidRequestError(constants.MISSING_CURRENCY_DATA) from e
            raise InvalidRequestError(constants.INVALID_AMOUNT) from e

    def prompt(self) -> str:
        """Return prompt asking the model for travel insights."""
        return constants.INSIGHTS_PROMPT_TEMPLATE.format(
            amount=self.amount,
            source=self.source,
            target=self.target,
            converted_amount=self.converted_amount,
        )
