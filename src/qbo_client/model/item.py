import datetime
from decimal import Decimal

from ..fields import Field
from .base import ENTITY_FIELDS, BaseReference, QuickbooksEntity
from .validations import InclusionOf, LengthOf, PresenceOf


def _is_inventory(item: "Item") -> bool:
    return item.type == Item.INVENTORY_TYPE


class Item(QuickbooksEntity):
    XML_COLLECTION_NODE = "Item"
    XML_NODE = "Item"
    REST_RESOURCE = "item"

    INVENTORY_TYPE = "Inventory"
    NON_INVENTORY_TYPE = "NonInventory"
    SERVICE_TYPE = "Service"
    ITEM_TYPES = (INVENTORY_TYPE, NON_INVENTORY_TYPE, SERVICE_TYPE)

    ref_name_field = "name"

    fields = ENTITY_FIELDS + (
        Field("name", "Name"),
        Field("sku", "Sku"),
        Field("description", "Description"),
        Field("active", "Active", bool),
        Field("sub_item", "SubItem", bool),
        Field("parent_ref", "ParentRef", BaseReference),
        Field("level", "Level", int),
        Field("fully_qualified_name", "FullyQualifiedName"),
        Field("taxable", "Taxable", bool),
        Field("sales_tax_included", "SalesTaxIncluded", bool),
        Field("unit_price", "UnitPrice", Decimal),
        Field("type", "Type"),
        Field("income_account_ref", "IncomeAccountRef", BaseReference),
        Field("purchase_desc", "PurchaseDesc"),
        Field("purchase_cost", "PurchaseCost", Decimal),
        Field("expense_account_ref", "ExpenseAccountRef", BaseReference),
        Field("asset_account_ref", "AssetAccountRef", BaseReference),
        Field("track_quantity_on_hand", "TrackQtyOnHand", bool),
        Field("quantity_on_hand", "QtyOnHand", Decimal),
        Field("inventory_start_date", "InvStartDate", datetime.date),
    )

    validations = (
        PresenceOf("name"),
        LengthOf("name", maximum=100),
        InclusionOf("type", in_=ITEM_TYPES),
        PresenceOf("income_account_ref"),
        PresenceOf(
            "asset_account_ref",
            "expense_account_ref",
            "quantity_on_hand",
            "inventory_start_date",
            if_=_is_inventory,
        ),
    )
