from typing import List, Optional

from chalice import Response

from chalicelib.base_class_entity import EntityBase
from chalicelib.constants import keys_structure, db_structure
from chalicelib.utils import db as utils_db, exceptions, app as utils_app
from chalicelib.utils.logger import logger


class MenuItem(EntityBase):
    collection = keys_structure.menu_collection
    record_structure = db_structure.MENU_ITEM
    not_found_exception = exceptions.MenuItemNotFound
    not_found_message = 'Menu item not found'

    def __init__(self, id_, **kwargs):
        EntityBase.__init__(self, id_)

        self.name: str = kwargs.get('name')
        self.price: int = kwargs.get('price')
        self.image: str = kwargs.get('image')
        self.description: str = kwargs.get('description')
        self.record_type = 'menu_item'

    def _to_dict(self):
        return {
            'id_': self.id_,
            'name': self.name,
            'price': self.price,
            'image': self.image,
            'description': self.description
        }


def get_menu_items(store=utils_db.get_store) -> List[MenuItem]:
    return MenuItem.get_all(store=store)


def find_menu_item_by_name(name, menu_items: List[MenuItem]) -> Optional[MenuItem]:
    if not isinstance(name, str):
        return None
    for menu_item in menu_items:
        if menu_item.name == name:
            return menu_item
    return None


@utils_app.request_exception_handler
@utils_app.log_start_finish
def endpoint_get_menu_items() -> Response:
    menu_items = [menu_item.to_ui() for menu_item in get_menu_items()]
    logger.info(f"endpoint_get_menu_items ::: returning menu items={[item['id'] for item in menu_items]}")
    return utils_app.success_response(data=menu_items)


@utils_app.request_exception_handler
@utils_app.log_start_finish
def endpoint_get_menu_item(menu_item_id) -> Response:
    menu_item = MenuItem.init_get_by_id(menu_item_id)
    return utils_app.success_response(data=menu_item.to_ui())
