"""Status messages returned or raised by the product store.

Kept in one module so they can be translated in a single place.
"""

PRODUCT_CREATED = "Product #{id} was added successfully."
PRODUCT_CREATE_FAILED = "A problem occurred while adding the product."
PRODUCT_NOT_FOUND = "No product exists with that ID."
PRODUCT_NAME_TAKEN = (
    "A product with that name already exists. Please choose another name."
)
PRODUCT_UPDATED = "Product was updated."
PRODUCT_DELETED = "Product was deleted."
PRODUCTS_ALL_DELETED = "All products were deleted."
PRODUCTS_DELETED = "Products were removed successfully."
