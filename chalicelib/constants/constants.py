ORDER_STATUS_PENDING = 'pending'

ORDER_STATUSES = (
    ORDER_STATUS_PENDING,
    'confirmed',
    'preparing',
    'out_for_delivery',
    'delivered',
    'cancelled'
)

CUSTOMER_NAME_PATTERN = r'[A-Za-z\s]+'
PHONE_MIN_DIGITS = 7
PHONE_MAX_DIGITS = 15
ADDRESS_MIN_LENGTH = 5

# fields of POST /api/orders, in the order they are checked for presence
ORDER_REQUEST_FIELDS = ('item', 'quantity', 'name', 'phone', 'address', 'payment')
