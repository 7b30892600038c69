import datetime
from decimal import Decimal
from typing import Optional

from ..fields import Field
from .base import BaseReference, QuickbooksBaseObject


class SalesItemLineDetail(QuickbooksBaseObject):
    fields = (
        Field("service_date", "ServiceDate", datetime.date),
        Field("item_ref", "ItemRef", BaseReference),
        Field("class_ref", "ClassRef", BaseReference),
        Field("unit_price", "UnitPrice", Decimal),
        Field("quantity", "Qty", Decimal),
        Field("tax_code_ref", "TaxCodeRef", BaseReference),
    )


class Line(QuickbooksBaseObject):
    SALES_ITEM_LINE_DETAIL = "SalesItemLineDetail"

    fields = (
        Field("id", "Id", int),
        Field("line_num", "LineNum", int),
        Field("description", "Description"),
        Field("amount", "Amount", Decimal),
        Field("detail_type", "DetailType"),
        Field("sales_item_line_detail", "SalesItemLineDetail", SalesItemLineDetail),
    )

    @classmethod
    def sales_item(
        cls,
        item_ref: BaseReference,
        amount: Decimal,
        quantity: Optional[Decimal] = None,
        unit_price: Optional[Decimal] = None,
        description: Optional[str] = None,
    ) -> "Line":
        """Build a SalesItemLineDetail line for an invoice."""
        return cls(
            description=description,
            amount=amount,
            detail_type=cls.SALES_ITEM_LINE_DETAIL,
            sales_item_line_detail=SalesItemLineDetail(
                item_ref=item_ref, quantity=quantity, unit_price=unit_price
            ),
        )
