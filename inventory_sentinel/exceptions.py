class NotFoundError(ValueError):
    """Lookup/update/delete target (or a referenced record) does not exist."""

    def __init__(self, entity: str, record_id: str):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} not found: {record_id}")


class ConflictError(ValueError):
    """Operation refused because of the current state of related records."""
