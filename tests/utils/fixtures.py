import pytest
from chalice.test import Client

from app import app
from chalicelib.constants import keys_structure
from chalicelib.utils import db
from tests.utils.memory_store import InMemoryStore


def make_order_record(id_, item_id=1, item='Pizza', price=1200, quantity=1, status='pending',
                      created_at='2024-01-01T00:00:00.000Z'):
    return {
        'id': id_,
        'item': item,
        'itemId': item_id,
        'quantity': quantity,
        'price': price,
        'totalPrice': price * quantity,
        'customerName': 'John Doe',
        'customerPhone': '+1 (555) 123-4567',
        'deliveryAddress': '221B Baker Street',
        'paymentMethod': 'cash',
        'status': status,
        'createdAt': created_at,
        'updatedAt': created_at
    }


@pytest.fixture
def memory_store() -> InMemoryStore:
    store = InMemoryStore()
    db.set_store(store)
    yield store
    db.set_store(None)


@pytest.fixture
def stored_orders(memory_store):
    memory_store.documents[keys_structure.orders_collection] = [
        make_order_record(1700000000001, item_id=1, item='Pizza', price=1200, quantity=2),
        make_order_record(1700000000002, item_id=2, item='Burger', price=600, quantity=1, status='delivered'),
        make_order_record(1700000000003, item_id=1, item='Pizza', price=1200, quantity=1, status='cancelled')
    ]
    return memory_store


@pytest.fixture
def chalice_client(memory_store):
    with Client(app) as client:
        yield client
