"""Product as seen from the ordering side.

The catalog owns products and their prices; orders only read the
current price and copy it into a line at materialization time.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderflow.domain.model.value_objects import Money


@dataclass
class Product:

    id: int
    name: str
    price: Money
