from ..model.item import Item
from .base_service import BaseService


class ItemService(BaseService):
    model = Item
