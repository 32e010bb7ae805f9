"""
Base implementation of the Document interface.

Stores key/value pairs in a plain dict and narrows values on typed reads.
"""

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

from ..core.exceptions import PropertyTypeError
from ..core.interfaces.document import Document


T = TypeVar('T')


class AbstractDocument(Document):
    """
    Base class for documents backed by a property dictionary.

    The dictionary passed in is the one the document mutates; when None
    is given an empty dictionary is created. Concrete documents (for
    example ``Car``) extend this class and add named accessors.

    Example:
        car = Car({"model": "Tesla", "year": 2022})
        model = car.get_model()
        year = car.get("year", int)
    """

    def __init__(self, properties: Optional[Dict[str, Any]] = None):
        self._properties = properties if properties is not None else {}
        self._logger = logging.getLogger(__name__)

    def put(self, key: str, value: Any) -> None:
        self._properties[key] = value
        self._logger.debug(f"{self.__class__.__name__}: put {key}={value!r}")

    def get(self, key: str, expected_type: Optional[Type[T]] = None) -> Optional[T]:
        """
        Read a property, optionally narrowed to ``expected_type``.

        Args:
            key: Property key
            expected_type: Type the stored value must be an instance of

        Returns:
            The stored value, or None if the key was never put

        Raises:
            PropertyTypeError: When the value is present but is not an
                instance of ``expected_type``
        """
        value = self._properties.get(key)
        if expected_type is None or value is None:
            return value

        if not self._is_instance(value, expected_type):
            raise PropertyTypeError(
                f"Property '{key}' holds a {type(value).__name__} "
                f"that does not match the requested type",
                key=key,
                expected_type=expected_type,
                actual_type=type(value)
            )
        return value

    @staticmethod
    def _is_instance(value: Any, expected_type) -> bool:
        # bool is an int subclass; it only matches when bool or object is requested
        if isinstance(value, bool):
            requested = expected_type if isinstance(expected_type, tuple) else (expected_type,)
            return bool in requested or object in requested
        return isinstance(value, expected_type)

    def keys(self) -> List[str]:
        """List the keys currently stored."""
        return list(self._properties.keys())

    def to_dict(self) -> Dict[str, Any]:
        """Shallow copy of the properties."""
        return self._properties.copy()

    def __contains__(self, key: str) -> bool:
        return key in self._properties

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._properties!r})"
