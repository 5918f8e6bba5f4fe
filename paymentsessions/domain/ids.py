"""
Identifier and currency types shared by the request models.

They are plain strings once validated, so they serialize to the wire
unchanged.
"""

from typing import Annotated

from pydantic import StringConstraints

CustomerId = Annotated[str, StringConstraints(pattern=r"^cus_\w+$")]

# Coupons can be created with arbitrary, caller chosen ids
CouponId = Annotated[str, StringConstraints(min_length=1)]

# Legacy plans can carry caller chosen ids, so any non-empty id is accepted
PriceId = Annotated[str, StringConstraints(min_length=1)]

# Three-letter ISO currency code, sent in lowercase
Currency = Annotated[
    str,
    StringConstraints(to_lower=True, pattern=r"^[A-Za-z]{3}$"),
]
