"""Datastore exceptions raised by the table gateway."""


class GatewayError(Exception):
    """A datastore read or write failed."""


class UnknownTableError(GatewayError):
    def __init__(self, table: str):
        super().__init__(f"Unknown table: {table}")
        self.table = table


class UnknownIndexError(GatewayError):
    def __init__(self, table: str, index_name: str):
        super().__init__(f"Table {table} has no index {index_name}")
        self.table = table
        self.index_name = index_name


class ItemNotFoundError(GatewayError):
    """Update targeted a key that does not exist."""

    def __init__(self, table: str, key: str):
        super().__init__(f"No item {key} in table {table}")
        self.table = table
        self.key = key
