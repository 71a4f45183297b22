# entity attribute -> key used in json documents and api payloads
to_db = {
    'id_': 'id',
    'item_id': 'itemId',
    'total_price': 'totalPrice',
    'customer_name': 'customerName',
    'customer_phone': 'customerPhone',
    'delivery_address': 'deliveryAddress',
    'payment_method': 'paymentMethod',
    'created_at': 'createdAt',
    'updated_at': 'updatedAt'
}

from_db = {value: key for key, value in to_db.items()}
