from uuid import uuid4

from chalice import Chalice

from chalicelib import menu_items, orders, stats
from chalicelib.utils.logger import logger, log_request

app = Chalice(app_name='foods-for-you-backend')

app.debug = False

BODY_CONTENT_TYPES = ['application/json', 'application/x-www-form-urlencoded']


@app.middleware('http')
def request_id_middleware(event, get_response):
    logger.current_request_id = (event.context or {}).get('requestId') or str(uuid4())
    log_request(event)
    return get_response(event)


@app.route('/health-check', methods=['GET'], cors=True)
def health_check():
    return {'health': 'check'}


# MENU
@app.route('/api/menu', methods=['GET'], cors=True)
def get_menu():
    return menu_items.endpoint_get_menu_items()


@app.route('/api/menu/{menu_item_id}', methods=['GET'], cors=True)
def get_menu_item(menu_item_id):
    return menu_items.endpoint_get_menu_item(menu_item_id)


# ORDERS
@app.route('/api/orders', methods=['POST'], content_types=BODY_CONTENT_TYPES, cors=True)
def create_order():
    """
    Places an order for a single menu item, the price is taken from the menu
    """
    return orders.endpoint_create_order(app.current_request)


@app.route('/api/orders', methods=['GET'], cors=True)
def get_orders():
    return orders.endpoint_get_orders()


@app.route('/api/orders/{order_id}', methods=['GET'], cors=True)
def get_order_by_id(order_id):
    return orders.endpoint_get_order(order_id)


@app.route('/api/orders/{order_id}', methods=['PATCH'], content_types=BODY_CONTENT_TYPES, cors=True)
def update_order_status(order_id):
    """
    Any status may follow any other, the order's updatedAt is refreshed
    """
    return orders.endpoint_update_order_status(app.current_request, order_id)


@app.route('/api/orders/{order_id}', methods=['DELETE'], cors=True)
def delete_order(order_id):
    return orders.endpoint_delete_order(order_id)


# STATS
@app.route('/api/stats', methods=['GET'], cors=True)
def get_stats():
    return stats.endpoint_get_stats()
