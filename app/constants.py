"""Application constants that never change across environments.

These are true constants representing physical facts or fixed business rules
that should never vary between dev/staging/prod.
"""

# ===== Geographic Constants =====
EARTH_RADIUS_KM = 6371.0  # Earth's radius in kilometers (for Haversine formula)

# ===== Shop Constraints =====
SHOP_ADDRESS_MIN_LENGTH = 10
SHOP_ADDRESS_MAX_LENGTH = 500
SHOP_NAME_MAX_LENGTH = 100
PHONE_NUMBER_MAX_LENGTH = 20
WORKING_HOURS_MAX_LENGTH = 50

# ===== User Constraints =====
USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 8
PASSWORD_HASH_MAX_LENGTH = 255

# ===== Sorting =====
SHOP_SORTABLE_FIELDS = ("name", "address", "shop_type", "created_at")

# ===== Enum Storage =====
ENUM_COLUMN_LENGTH = 20
