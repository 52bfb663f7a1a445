# Auth
AUTH_REGISTER = '/api/auth/register'
AUTH_LOGIN = '/api/auth/login'

# User
USER_PROFILE = '/api/user/profile'
USER_PROFILE_WITH_IMAGE = '/api/user/profile/with-image'

# Catalogue
CATEGORY_LIST = '/api/categories'
PRODUCT_LIST = '/api/products'
PRODUCT_BULK_CREATE = '/api/products/bulk-create'
PRODUCT_WITH_IMAGE = '/api/products/with-image'
PRODUCT_WITH_IMAGE_URL = '/api/products/with-image-url'
PRODUCT_STATS = '/api/products/{product_id}/stats'
PRODUCT_GET = '/api/products/{product_id}'
PRODUCT_UPDATE = '/api/products/{product_id}'
PRODUCT_DELETE = '/api/products/{product_id}'
PRODUCT_VIEW = '/api/products/{product_id}/view'

# Cart
CART = '/api/cart'
CART_ITEM = '/api/cart/{product_id}'

# Favorites
FAVORITES = '/api/favorites'
FAVORITE_ITEM = '/api/favorites/{product_id}'

# Images
SAMPLE_IMAGES = '/api/sample-images'
UPLOADS = '/uploads'

# Checkout
PURCHASE = '/api/purchase'
BUY_NOW = '/api/buy-now'
PURCHASE_HISTORY = '/api/purchases'

# Common
HEALTH = '/health'
METRICS = '/metrics'
