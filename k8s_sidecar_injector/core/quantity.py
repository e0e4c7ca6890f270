"""
Kubernetes resource quantities.

Accepts the notation used in container resource limits: a signed decimal
number followed by a binary SI suffix (``Ki`` .. ``Ei``), a decimal SI suffix
(``n``, ``u``, ``m``, none, ``k`` .. ``E``) or a decimal exponent (``e3``).
"""

import re
from decimal import Decimal, DecimalException
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from k8s_sidecar_injector.utils.exceptions import InvalidQuantityError

_BINARY_SI = {
    "Ki": Decimal(2) ** 10,
    "Mi": Decimal(2) ** 20,
    "Gi": Decimal(2) ** 30,
    "Ti": Decimal(2) ** 40,
    "Pi": Decimal(2) ** 50,
    "Ei": Decimal(2) ** 60,
}

_DECIMAL_SI = {
    "n": Decimal("1e-9"),
    "u": Decimal("1e-6"),
    "m": Decimal("1e-3"),
    "": Decimal(1),
    "k": Decimal("1e3"),
    "M": Decimal("1e6"),
    "G": Decimal("1e9"),
    "T": Decimal("1e12"),
    "P": Decimal("1e15"),
    "E": Decimal("1e18"),
}

# Exponent alternative comes before the bare "E" (exa) suffix
_QUANTITY_RE = re.compile(
    r"(?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+))"
    r"(?P<suffix>Ki|Mi|Gi|Ti|Pi|Ei|[eE][+-]?\d+|[numkMGTPE])?"
)


class Quantity(BaseModel):
    """A parsed resource amount. Equality compares the numeric value."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Quantity as written, e.g. '500m'")
    value: Decimal = Field(..., description="Amount in base units (cores or bytes)")
    format: Literal["BinarySI", "DecimalSI", "DecimalExponent"] = "DecimalSI"

    def __str__(self) -> str:
        return self.text

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Quantity):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)


def parse_quantity(text: str) -> Quantity:
    """
    Parse a Kubernetes quantity string.

    Raises:
        InvalidQuantityError: if ``text`` does not follow the quantity grammar
    """
    if not isinstance(text, str):
        raise InvalidQuantityError(text)
    match = _QUANTITY_RE.fullmatch(text)
    if not match:
        raise InvalidQuantityError(text)

    suffix = match.group("suffix") or ""
    try:
        number = Decimal(match.group("number"))
        if suffix in _BINARY_SI:
            return Quantity(text=text, value=number * _BINARY_SI[suffix], format="BinarySI")
        if suffix in _DECIMAL_SI:
            return Quantity(text=text, value=number * _DECIMAL_SI[suffix], format="DecimalSI")
        exponent = int(suffix[1:])
        return Quantity(text=text, value=number.scaleb(exponent), format="DecimalExponent")
    except (DecimalException, ValueError) as e:
        raise InvalidQuantityError(text) from e
