from chalicelib.constants import keys_structure

MENU_ITEM = {
    'id': None,
    'name': None,
    'price': None,
    'image': None,
    'description': None
}

ORDER = {
    'id': None,
    'item': None,
    'itemId': None,
    'quantity': None,
    'price': None,
    'totalPrice': None,
    'customerName': None,
    'customerPhone': None,
    'deliveryAddress': None,
    'paymentMethod': None,
    'status': None,
    'createdAt': None,
    'updatedAt': None
}

MENU_SEED = [
    {
        'id': 1,
        'name': 'Pizza',
        'price': 1200,
        'image': 'https://images.unsplash.com/photo-1513104890138-7c749659a591?w=400&h=300&fit=crop',
        'description': 'Delicious pizza with fresh ingredients'
    },
    {
        'id': 2,
        'name': 'Burger',
        'price': 600,
        'image': 'https://images.unsplash.com/photo-1568901346375-23c9450c58cd?w=400&h=300&fit=crop',
        'description': 'Juicy burger with special sauce'
    },
    {
        'id': 3,
        'name': 'Pasta',
        'price': 900,
        'image': 'https://images.unsplash.com/photo-1621996346565-e3dbc646d9a9?w=400&h=300&fit=crop',
        'description': 'Creamy pasta with authentic flavors'
    }
]

# content written when a collection document does not exist yet
DOCUMENT_SEEDS = {
    keys_structure.menu_collection: MENU_SEED,
    keys_structure.orders_collection: []
}
