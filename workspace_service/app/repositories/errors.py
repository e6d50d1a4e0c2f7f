class ConflictError(Exception):
    """Raised by repositories when a write violates a uniqueness constraint"""

    def __init__(self, entity: str, detail: str = ""):
        self.entity = entity
        self.detail = detail
        super().__init__(f"{entity} conflict: {detail}" if detail else f"{entity} conflict")
