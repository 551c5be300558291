class EnvNotFoundError(Exception):
    """Raised when a required environment variable is not found."""

    def __init__(self, env_var_name: str):
        super().__init__(f"Environment variable '{env_var_name}' not found.")


class SessionNotSetError(Exception):
    """Raised when the database session is not set."""

    def __init__(self):
        super().__init__("Database session is not set.")


class MissingDBNameError(Exception):
    """Raised when a database-level operation needs a database name and none is configured."""

    def __init__(self):
        super().__init__("Database name is not set.")


class CustomerNotFoundError(Exception):
    """Raised when a customer id does not exist."""

    def __init__(self, customer_id: int):
        super().__init__(f"Customer '{customer_id}' not found.")


class OrderNotFoundError(Exception):
    """Raised when an order id does not exist."""

    def __init__(self, order_id: int):
        super().__init__(f"Order '{order_id}' not found.")


class ItemNotInOrderError(Exception):
    """Raised when removing an item that does not belong to the order."""

    def __init__(self, product_name: str, order_id: int | None):
        super().__init__(f"Item '{product_name}' is not part of order '{order_id}'.")
