"""
Schemas for the admin orders grid.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from backoffice.core.utils import GRID_DATETIME_FORMAT, format_price, parse_date, parse_decimal

ORDER_GRID_COLUMNS = (
    "id_order",
    "reference",
    "new",
    "country_name",
    "customer",
    "total_paid_tax_incl",
    "payment",
    "osname",
    "date_add",
)

INPUT_FILTERS = ("id_order", "reference", "customer", "total_paid_tax_incl", "payment")
SELECT_FILTERS = ("new", "country_name", "osname")


class OrderFilters(BaseModel):
    """Filters typed in the header row of the orders grid. Empty means unset."""
    model_config = ConfigDict(extra="ignore")

    id_order: Optional[int] = None
    reference: Optional[str] = None
    new: Optional[bool] = None
    country_name: Optional[str] = None
    customer: Optional[str] = None
    total_paid_tax_incl: Optional[Decimal] = None
    payment: Optional[str] = None
    osname: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None

    @field_validator('*', mode='before')
    @classmethod
    def empty_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if v == '':
                return None
        return v

    @field_validator('new', mode='before')
    @classmethod
    def validate_new(cls, v):
        if v is None or isinstance(v, bool):
            return v
        value = str(v).strip().lower()
        if value == '':
            return None
        if value in ('1', 'yes', 'true'):
            return True
        if value in ('0', 'no', 'false'):
            return False
        raise ValueError('New client filter must be Yes or No')

    @field_validator('total_paid_tax_incl', mode='before')
    @classmethod
    def validate_total(cls, v):
        if v is None:
            return None
        if isinstance(v, str):
            v = v.replace("€", "")
        return parse_decimal(v)

    @field_validator('date_from', 'date_to', mode='before')
    @classmethod
    def validate_dates(cls, v):
        try:
            return parse_date(v)
        except ValueError:
            raise ValueError('Dates must use the YYYY-MM-DD format')

    @model_validator(mode='after')
    def check_date_range(self):
        if self.date_from and self.date_to and self.date_from > self.date_to:
            raise ValueError('Date from must be before date to')
        return self

    @classmethod
    def from_query_params(cls, params) -> "OrderFilters":
        """Read `orders[<column>]` parameters as posted by the grid's filter row"""
        values = {}
        for key in params.keys():
            if key.startswith("orders[") and key.endswith("]"):
                values[key[len("orders["):-1]] = params.get(key)
        return cls(**values)

    def is_empty(self) -> bool:
        return not any(value is not None for value in self.model_dump().values())

    def as_form_values(self) -> Dict[str, str]:
        """Current filter values as the filter inputs should display them"""
        values = {}
        for name, value in self.model_dump().items():
            if value is None:
                values[name] = ""
            elif name == "new":
                values[name] = "1" if value else "0"
            else:
                values[name] = str(value)
        return values


class OrderGridRow(BaseModel):
    id_order: int
    reference: str
    new: bool
    country_name: str
    customer: str
    total_paid_tax_incl: Decimal
    payment: str
    osname: str
    os_color: str = ""
    date_add: datetime

    def cells(self) -> Dict[str, str]:
        """Cell text keyed by column, as rendered in the grid"""
        return {
            "id_order": str(self.id_order),
            "reference": self.reference,
            "new": "Yes" if self.new else "No",
            "country_name": self.country_name,
            "customer": self.customer,
            "total_paid_tax_incl": format_price(self.total_paid_tax_incl),
            "payment": self.payment,
            "osname": self.osname,
            "date_add": self.date_add.strftime(GRID_DATETIME_FORMAT),
        }


class OrderGrid(BaseModel):
    rows: List[OrderGridRow]
    total: int
    page: int
    per_page: int
    total_pages: int
    order_by: str
    sort_order: str
    filters: OrderFilters
    countries: List[str] = []
    statuses: List[str] = []

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1
