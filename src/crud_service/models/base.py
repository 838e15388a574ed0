"""
Shared Pydantic base model for API payloads.

Payloads are exchanged with camelCase keys while the Python attributes stay
snake_case. Optional attributes that are unset serialize as absent keys
rather than ``null``.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @model_serializer(mode='wrap')
    def _omit_none(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        return {key: value for key, value in handler(self).items() if value is not None}
