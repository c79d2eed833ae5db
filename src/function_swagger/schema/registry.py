"""Definition registry: one object schema per structured type name."""

import logging
from enum import Enum

from .mapper import map_type
from .models import Schema
from .types import fields_of

logger = logging.getLogger(__name__)

DEFINITIONS_PREFIX = "#/definitions/"


class DefinitionState(Enum):
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


class DefinitionRegistry:
    """Collects the ``definitions`` section of one document.

    Definitions are keyed by the type's short name. Two distinct types sharing
    a short name resolve to whichever was registered first.
    """

    def __init__(self):
        self._definitions: dict[str, Schema] = {}
        self._state: dict[str, DefinitionState] = {}

    @property
    def definitions(self) -> dict[str, Schema]:
        return dict(self._definitions)

    def __contains__(self, name: str) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def ref_for(self, tp: type) -> Schema:
        """Register ``tp`` if needed and return a ``$ref`` schema pointing at it."""
        self.ensure(tp)
        return Schema(ref=DEFINITIONS_PREFIX + tp.__name__)

    def ensure(self, tp: type) -> None:
        """Register an object definition for ``tp`` unless one exists or is being built."""
        name = tp.__name__
        if name in self._state:
            return

        self._state[name] = DefinitionState.IN_PROGRESS
        properties: dict[str, Schema] = {}
        for field in fields_of(tp):
            properties[field.name] = map_type(field.annotation, self)

        self._definitions[name] = Schema(type="object", properties=properties)
        self._state[name] = DefinitionState.COMPLETE
        logger.debug("Registered definition %s with %d properties", name, len(properties))
