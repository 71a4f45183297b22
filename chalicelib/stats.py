from typing import Dict, List

from chalice import Response

from chalicelib.constants.constants import ORDER_STATUSES
from chalicelib.menu_items import MenuItem, get_menu_items
from chalicelib.orders import Order, get_orders
from chalicelib.utils import db as utils_db, app as utils_app
from chalicelib.utils.logger import logger


def _revenue(orders: List[Order]):
    return sum(order.total_price or 0 for order in orders)


def compute_stats(orders: List[Order], menu_items: List[MenuItem]) -> Dict:
    """
    Summary of orders against the catalog.
    popularItems lists every menu item, most ordered first;
    items with the same number of orders keep their catalog order
    """
    popular_items = []
    for menu_item in menu_items:
        item_orders = [order for order in orders if order.item_id == menu_item.id_]
        popular_items.append({
            'name': menu_item.name,
            'orders': len(item_orders),
            'revenue': _revenue(item_orders)
        })

    return {
        'totalOrders': len(orders),
        'totalRevenue': _revenue(orders),
        'ordersByStatus': {
            status: len([order for order in orders if order.status == status]) for status in ORDER_STATUSES
        },
        'popularItems': sorted(popular_items, key=lambda item: item['orders'], reverse=True)
    }


def get_stats(store=utils_db.get_store) -> Dict:
    return compute_stats(get_orders(store=store), get_menu_items(store=store))


@utils_app.request_exception_handler
@utils_app.log_start_finish
def endpoint_get_stats() -> Response:
    stats = get_stats()
    logger.info(f"endpoint_get_stats ::: {stats['totalOrders']=} {stats['totalRevenue']=}")
    return utils_app.success_response(data=stats)
