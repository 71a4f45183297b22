menu_collection = 'menu'
orders_collection = 'orders'

document_name = '{collection}.json'
