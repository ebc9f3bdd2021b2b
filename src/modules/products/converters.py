from decimal import Decimal


class DecimalConverter:
    """Path converter for non-negative decimal values such as ``9.99``."""

    regex = r"[0-9]+(?:\.[0-9]+)?"

    def to_python(self, value: str) -> Decimal:
        return Decimal(value)

    def to_url(self, value) -> str:
        return str(value)
