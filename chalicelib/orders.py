import re
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from chalice import Response

from chalicelib.base_class_entity import EntityBase
from chalicelib.constants import keys_structure, db_structure
from chalicelib.constants.constants import ORDER_STATUSES, ORDER_STATUS_PENDING, ORDER_REQUEST_FIELDS, \
    CUSTOMER_NAME_PATTERN, PHONE_MIN_DIGITS, PHONE_MAX_DIGITS, ADDRESS_MIN_LENGTH
from chalicelib.constants.status_codes import http201
from chalicelib.menu_items import MenuItem, get_menu_items, find_menu_item_by_name
from chalicelib.utils import data as utils_data, db as utils_db, app as utils_app, exceptions
from chalicelib.utils.logger import logger


@dataclass
class CreateOrderRequest:
    """
    Body of POST /api/orders.
    Values are kept as sent, validate() checks them in a fixed order
    and the first failing rule decides the error message
    """
    item: Any = None
    quantity: Any = None
    name: Any = None
    phone: Any = None
    address: Any = None
    payment: Any = None

    @classmethod
    def from_body(cls, request_body: Dict) -> 'CreateOrderRequest':
        return cls(**{field: request_body.get(field) for field in ORDER_REQUEST_FIELDS})

    def validate(self, menu_items: List[MenuItem]) -> Tuple[MenuItem, int]:
        if any(utils_data.is_blank(getattr(self, field)) for field in ORDER_REQUEST_FIELDS):
            raise exceptions.ValidationException('All fields are required')

        if not re.fullmatch(CUSTOMER_NAME_PATTERN, str(self.name).strip()):
            raise exceptions.ValidationException('Name should contain only letters.')

        menu_item = find_menu_item_by_name(self.item, menu_items)
        if menu_item is None:
            raise exceptions.ValidationException('Invalid menu item')

        quantity = utils_data.parse_int(self.quantity)
        if quantity is None or quantity < 1:
            raise exceptions.ValidationException('Quantity must be at least 1')

        phone_digits = re.sub(r'[^0-9]', '', str(self.phone).strip())
        if not PHONE_MIN_DIGITS <= len(phone_digits) <= PHONE_MAX_DIGITS:
            raise exceptions.ValidationException(
                f'Enter a valid phone number ({PHONE_MIN_DIGITS}-{PHONE_MAX_DIGITS} digits)')

        if len(str(self.address).strip()) < ADDRESS_MIN_LENGTH:
            raise exceptions.ValidationException(f'Address must be at least {ADDRESS_MIN_LENGTH} characters')

        return menu_item, quantity


class Order(EntityBase):
    collection = keys_structure.orders_collection
    record_structure = db_structure.ORDER
    not_found_exception = exceptions.OrderNotFound
    not_found_message = 'Order not found'

    required_fields_validation = {
        'id': lambda x: isinstance(x, int),
        'item': lambda x: isinstance(x, str),
        'itemId': lambda x: isinstance(x, int),
        'quantity': lambda x: isinstance(x, int) and x >= 1,
        'price': lambda x: isinstance(x, (int, float)),
        'totalPrice': lambda x: isinstance(x, (int, float)),
        'status': lambda x: x in ORDER_STATUSES,
        'createdAt': lambda x: isinstance(x, str),
        'updatedAt': lambda x: isinstance(x, str)
    }

    def __init__(self, id_, **kwargs):
        EntityBase.__init__(self, id_)

        self.item: str = kwargs.get('item')
        self.item_id: int = kwargs.get('item_id')
        self.quantity: int = kwargs.get('quantity')
        self.price: int = kwargs.get('price')
        self.total_price: int = kwargs.get('total_price')
        self.customer_name: str = kwargs.get('customer_name')
        self.customer_phone: str = kwargs.get('customer_phone')
        self.delivery_address: str = kwargs.get('delivery_address')
        self.payment_method: str = kwargs.get('payment_method')
        self.status: str = kwargs.get('status') or ORDER_STATUS_PENDING
        self.created_at: str = kwargs.get('created_at') or utils_data.now_iso()
        self.updated_at: str = kwargs.get('updated_at') or self.created_at
        self.record_type = 'order'

    @classmethod
    def init_create(cls, order_request: CreateOrderRequest, menu_item: MenuItem, quantity: int, id_: int):
        created_at = utils_data.now_iso()
        return cls(
            id_=id_,
            item=order_request.item,
            item_id=menu_item.id_,
            quantity=quantity,
            price=menu_item.price,
            total_price=menu_item.price * quantity,
            customer_name=order_request.name,
            customer_phone=order_request.phone,
            delivery_address=order_request.address,
            payment_method=order_request.payment,
            status=ORDER_STATUS_PENDING,
            created_at=created_at,
            updated_at=created_at
        )

    def set_status(self, status: str) -> None:
        self.status = status
        self.updated_at = utils_data.now_iso_after(self.created_at, self.updated_at)

    def _to_dict(self):
        return {
            'id_': self.id_,
            'item': self.item,
            'item_id': self.item_id,
            'quantity': self.quantity,
            'price': self.price,
            'total_price': self.total_price,
            'customer_name': self.customer_name,
            'customer_phone': self.customer_phone,
            'delivery_address': self.delivery_address,
            'payment_method': self.payment_method,
            'status': self.status,
            'created_at': self.created_at,
            'updated_at': self.updated_at
        }


def _next_order_id(records: List[Dict]) -> int:
    """
    Epoch milliseconds, bumped past the largest id already used
    """
    used_ids = [record.get('id') for record in records
                if isinstance(record, dict) and isinstance(record.get('id'), int)]
    return max(int(time.time() * 1000), max(used_ids, default=0) + 1)


def _save_orders(records: List[Dict], failure_message: str, store) -> None:
    if not utils_db.save_all(Order.collection, records, store=store):
        raise exceptions.PersistenceException(failure_message)


def create_order(request_body: Dict, store=utils_db.get_store) -> Order:
    order_request = CreateOrderRequest.from_body(request_body)
    menu_item, quantity = order_request.validate(get_menu_items(store=store))

    with utils_db.locked(Order.collection, store=store):
        records = utils_db.load_all(Order.collection, store=store)
        order = Order.init_create(order_request, menu_item, quantity, id_=_next_order_id(records))
        record = order._to_record()
        order._validate_mandatory_fields(record)
        records.append(record)
        _save_orders(records, 'Failed to save order', store)

    logger.info(f"create_order ::: order {order.id_} successfully created, {order.total_price=}")
    return order


def get_orders(store=utils_db.get_store) -> List[Order]:
    return Order.get_all(store=store)


def update_order_status(order_id, status: Optional[str], store=utils_db.get_store) -> Order:
    if status not in ORDER_STATUSES:
        raise exceptions.ValidationException('Valid status is required')

    with utils_db.locked(Order.collection, store=store):
        records = utils_db.load_all(Order.collection, store=store)
        index = Order._find_record_index(records, order_id)
        if index is None:
            raise exceptions.OrderNotFound(Order.not_found_message)
        order = Order.init_by_record(records[index])
        order.set_status(status)
        records[index] = {**records[index], **order._to_record()}
        _save_orders(records, 'Failed to update order', store)

    logger.info(f"update_order_status ::: order {order.id_} moved to {status=}")
    return order


def delete_order(order_id, store=utils_db.get_store) -> None:
    with utils_db.locked(Order.collection, store=store):
        records = utils_db.load_all(Order.collection, store=store)
        index = Order._find_record_index(records, order_id)
        if index is None:
            raise exceptions.OrderNotFound(Order.not_found_message)
        remaining = [record for record in records
                     if not isinstance(record, dict) or record.get('id') != records[index].get('id')]
        _save_orders(remaining, 'Failed to delete order', store)

    logger.info(f"delete_order ::: order {order_id} deleted")


@utils_app.request_exception_handler
@utils_app.log_start_finish
def endpoint_create_order(request) -> Response:
    order = create_order(utils_data.parse_raw_body(request))
    return utils_app.success_response(data=order.to_ui(), message='Order placed successfully', status_code=http201)


@utils_app.request_exception_handler
@utils_app.log_start_finish
def endpoint_get_orders() -> Response:
    return utils_app.success_response(data=[order.to_ui() for order in get_orders()])


@utils_app.request_exception_handler
@utils_app.log_start_finish
def endpoint_get_order(order_id) -> Response:
    return utils_app.success_response(data=Order.init_get_by_id(order_id).to_ui())


@utils_app.request_exception_handler
@utils_app.log_start_finish
def endpoint_update_order_status(request, order_id) -> Response:
    status = utils_data.parse_raw_body(request).get('status')
    order = update_order_status(order_id, status)
    return utils_app.success_response(data=order.to_ui(), message='Order status updated')


@utils_app.request_exception_handler
@utils_app.log_start_finish
def endpoint_delete_order(order_id) -> Response:
    delete_order(order_id)
    return utils_app.success_response(message='Order deleted successfully')
