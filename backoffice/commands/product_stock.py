"""
Command carrying the intent to change the stock settings of one product.

Every field except the product id is optional: None means "leave unchanged".
Setters return the command so calls can be chained:

    command = (
        UpdateProductStockCommand(42)
        .set_quantity(10)
        .set_out_of_stock_type(OutOfStockType.AVAILABLE)
    )
"""

from datetime import date
from typing import Any, Dict, Mapping, Optional

from backoffice.core.enums import OutOfStockType, PackStockType
from backoffice.core.exceptions import ProductConstraintError
from backoffice.core.utils import parse_date
from backoffice.core.value_objects import ProductId

TRUE_VALUES = ("1", "on", "true", "yes")


class UpdateProductStockCommand:
    def __init__(self, product_id: int):
        self._product_id = ProductId(product_id)
        self._use_advanced_stock_management: Optional[bool] = None
        self._depends_on_stock: Optional[bool] = None
        self._pack_stock_type: Optional[PackStockType] = None
        self._quantity: Optional[int] = None
        self._out_of_stock_type: Optional[OutOfStockType] = None
        self._minimal_quantity: Optional[int] = None
        self._location: Optional[str] = None
        self._low_stock_threshold: Optional[int] = None
        self._low_stock_alert: Optional[bool] = None
        self._localized_available_now_labels: Optional[Dict[int, str]] = None
        self._localized_available_later_labels: Optional[Dict[int, str]] = None
        self._available_date: Optional[date] = None
        self._add_movement: bool = True

    @property
    def product_id(self) -> ProductId:
        return self._product_id

    @property
    def use_advanced_stock_management(self) -> Optional[bool]:
        return self._use_advanced_stock_management

    def set_use_advanced_stock_management(self, use_advanced_stock_management: bool) -> "UpdateProductStockCommand":
        self._use_advanced_stock_management = use_advanced_stock_management
        return self

    @property
    def depends_on_stock(self) -> Optional[bool]:
        return self._depends_on_stock

    def set_depends_on_stock(self, depends_on_stock: bool) -> "UpdateProductStockCommand":
        self._depends_on_stock = depends_on_stock
        return self

    @property
    def pack_stock_type(self) -> Optional[PackStockType]:
        return self._pack_stock_type

    def set_pack_stock_type(self, pack_stock_type: int) -> "UpdateProductStockCommand":
        """Raises ProductPackConstraintError for an unknown pack stock type."""
        self._pack_stock_type = PackStockType.from_int(pack_stock_type)
        return self

    @property
    def quantity(self) -> Optional[int]:
        return self._quantity

    def set_quantity(self, quantity: int) -> "UpdateProductStockCommand":
        self._quantity = quantity
        return self

    @property
    def out_of_stock_type(self) -> Optional[OutOfStockType]:
        return self._out_of_stock_type

    def set_out_of_stock_type(self, out_of_stock_type: int) -> "UpdateProductStockCommand":
        """Raises ProductStockConstraintError for an unknown out of stock type."""
        self._out_of_stock_type = OutOfStockType.from_int(out_of_stock_type)
        return self

    @property
    def minimal_quantity(self) -> Optional[int]:
        return self._minimal_quantity

    def set_minimal_quantity(self, minimal_quantity: int) -> "UpdateProductStockCommand":
        self._minimal_quantity = minimal_quantity
        return self

    @property
    def location(self) -> Optional[str]:
        return self._location

    def set_location(self, location: str) -> "UpdateProductStockCommand":
        self._location = location
        return self

    @property
    def low_stock_threshold(self) -> Optional[int]:
        return self._low_stock_threshold

    def set_low_stock_threshold(self, low_stock_threshold: int) -> "UpdateProductStockCommand":
        self._low_stock_threshold = low_stock_threshold
        return self

    @property
    def low_stock_alert(self) -> Optional[bool]:
        return self._low_stock_alert

    def set_low_stock_alert(self, low_stock_alert: bool) -> "UpdateProductStockCommand":
        self._low_stock_alert = low_stock_alert
        return self

    @property
    def localized_available_now_labels(self) -> Optional[Dict[int, str]]:
        return self._localized_available_now_labels

    def set_localized_available_now_labels(self, labels: Dict[int, str]) -> "UpdateProductStockCommand":
        self._localized_available_now_labels = labels
        return self

    @property
    def localized_available_later_labels(self) -> Optional[Dict[int, str]]:
        return self._localized_available_later_labels

    def set_localized_available_later_labels(self, labels: Dict[int, str]) -> "UpdateProductStockCommand":
        self._localized_available_later_labels = labels
        return self

    @property
    def available_date(self) -> Optional[date]:
        return self._available_date

    def set_available_date(self, available_date: date) -> "UpdateProductStockCommand":
        self._available_date = available_date
        return self

    @property
    def add_movement(self) -> bool:
        return self._add_movement

    def set_add_movement(self, add_movement: bool) -> "UpdateProductStockCommand":
        self._add_movement = add_movement
        return self

    @classmethod
    def from_form(cls, product_id: int, data: Mapping[str, Any]) -> "UpdateProductStockCommand":
        """
        Build a command from the `stock` section of the product form.

        Keys missing from the submission, or submitted empty, leave the
        matching field unset.
        """
        command = cls(product_id)

        def present(key):
            value = data.get(key)
            return value is not None and value != ""

        def as_int(key):
            try:
                return int(data[key])
            except (TypeError, ValueError):
                raise ProductConstraintError(f"Field '{key}' must be an integer, got {data[key]!r}")

        def as_bool(key):
            value = data[key]
            if isinstance(value, bool):
                return value
            return str(value).strip().lower() in TRUE_VALUES

        def as_labels(key):
            value = data[key]
            if not isinstance(value, Mapping):
                raise ProductConstraintError(f"Field '{key}' must map language ids to labels, got {value!r}")
            try:
                return {int(language_id): str(label) for language_id, label in value.items()}
            except (TypeError, ValueError):
                raise ProductConstraintError(f"Field '{key}' must map language ids to labels, got {value!r}")

        if present('use_advanced_stock_management'):
            command.set_use_advanced_stock_management(as_bool('use_advanced_stock_management'))
        if present('depends_on_stock'):
            command.set_depends_on_stock(as_bool('depends_on_stock'))
        if present('pack_stock_type'):
            command.set_pack_stock_type(as_int('pack_stock_type'))
        if present('quantity'):
            command.set_quantity(as_int('quantity'))
        if present('out_of_stock_type'):
            command.set_out_of_stock_type(as_int('out_of_stock_type'))
        if present('minimal_quantity'):
            command.set_minimal_quantity(as_int('minimal_quantity'))
        if 'stock_location' in data and data['stock_location'] is not None:
            command.set_location(str(data['stock_location']).strip())
        if present('low_stock_threshold'):
            command.set_low_stock_threshold(as_int('low_stock_threshold'))
        if present('low_stock_alert'):
            command.set_low_stock_alert(as_bool('low_stock_alert'))
        if present('available_now_label'):
            command.set_localized_available_now_labels(as_labels('available_now_label'))
        if present('available_later_label'):
            command.set_localized_available_later_labels(as_labels('available_later_label'))
        if present('available_date'):
            try:
                command.set_available_date(parse_date(data['available_date']))
            except ValueError:
                raise ProductConstraintError(
                    f"Field 'available_date' must use the YYYY-MM-DD format, got {data['available_date']!r}"
                )
        if present('add_movement'):
            command.set_add_movement(as_bool('add_movement'))

        return command
