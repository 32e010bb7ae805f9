"""
Car document.

Adds named accessors for the model, price and color over the generic
document store.
"""

from typing import Any, Dict, Optional, Union

from .abstract_document import AbstractDocument
from .properties import Property


class Car(AbstractDocument):
    """
    A car described by dynamic properties.

    Example:
        car = Car({"model": "Tesla Model S", "price": 79900})
        car.get_model()              # "Tesla Model S"
        car.set_model("Tesla Model 3")
        car.put("color", "red")      # properties can still be added freely
    """

    def __init__(self, properties: Optional[Dict[str, Any]] = None):
        super().__init__(properties)

    def get_model(self) -> str:
        # Absence falls back to ""; a non-str model raises PropertyTypeError.
        return self.get(Property.MODEL.value, str) or ""

    def set_model(self, model: str) -> None:
        self.put(Property.MODEL.value, model)

    def get_price(self) -> Optional[Union[int, float]]:
        """Price of the car, or None when it has not been set."""
        return self.get(Property.PRICE.value, (int, float))

    def set_price(self, price: Union[int, float]) -> None:
        self.put(Property.PRICE.value, price)

    def get_color(self) -> str:
        return self.get(Property.COLOR.value, str) or ""

    def set_color(self, color: str) -> None:
        self.put(Property.COLOR.value, color)
