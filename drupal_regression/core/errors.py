"""Exceptions raised by the regression content service."""


class RegressionError(Exception):
    """Base class for service errors."""


class ConfigError(RegressionError):
    """A configuration object could not be read."""


class UnknownEntityTypeError(RegressionError):
    """No storage or view builder exists for the requested entity type."""

    def __init__(self, entity_type: str):
        super().__init__(f"Unknown entity type: {entity_type}")
        self.entity_type = entity_type


class EntityNotFoundError(RegressionError):
    """A listed entity could not be loaded from storage."""

    def __init__(self, entity_type: str, entity_id: int):
        super().__init__(f"Entity {entity_type}:{entity_id} does not exist")
        self.entity_type = entity_type
        self.entity_id = entity_id
