"""Global constants for the vendormart application."""

# Snapshot-related constants
SNAPSHOT_SCHEMA_VERSION = 1
SNAPSHOT_COLLECTION = "snapshots"
GROUPS_STORE_NAME = "marketplace-groups"
NOTIFICATIONS_STORE_NAME = "marketplace-notifications"
ORDERS_STORE_NAME = "marketplace-orders"
PRODUCTS_STORE_NAME = "marketplace-products"

# Keys under which app state lives in app.extensions
GROUPS_EXTENSION = "vendormart.groups"
NOTIFICATIONS_EXTENSION = "vendormart.notifications"
ORDERS_EXTENSION = "vendormart.orders"
PRODUCTS_EXTENSION = "vendormart.products"
SNAPSHOTS_EXTENSION = "vendormart.snapshots"

# Id prefixes
GROUP_ID_PREFIX = "group"
NOTIFICATION_ID_PREFIX = "notif"
ORDER_ID_PREFIX = "ORD"
PRODUCT_ID_PREFIX = "prod"

# Group-related constants
MAX_PROGRESS_PERCENT = 100.0

# Dashboard-related constants
ESTIMATED_SAVINGS_RATE = 0.15
RECENT_VENDOR_ORDERS = 3
RECENT_SUPPLIER_ORDERS = 5
TOP_PRODUCTS = 3
