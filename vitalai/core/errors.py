"""Exceptions shared by the data-access and LLM layers."""


class NotFoundError(LookupError):
    """A row addressed by id does not exist (or is not owned by the caller)."""

    def __init__(self, entity: str, entity_id: object):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class LLMError(Exception):
    """Base error for upstream LLM calls."""


class LLMConfigurationError(LLMError):
    """API key missing or malformed."""


class LLMResponseError(LLMError):
    """Upstream returned an error status, a malformed envelope or unparseable JSON."""
