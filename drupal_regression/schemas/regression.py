from pydantic import BaseModel, BeforeValidator, Field
from typing import Annotated, Any, Dict, List, Optional


def _none_to_empty(value: Any) -> Any:
    # A key left blank in YAML ("ignored_fields:") loads as None.
    return {} if value is None else value


IgnoreTable = Annotated[Dict[str, Optional[List[str]]], BeforeValidator(_none_to_empty)]
MockTable = Annotated[Dict[str, Any], BeforeValidator(_none_to_empty)]


class GenerationSettings(BaseModel):
    """drupal_regression.settings"""
    ignored_bundles: IgnoreTable = Field(default_factory=dict)
    ignored_fields: IgnoreTable = Field(default_factory=dict)

    def is_bundle_ignored(self, entity_type: str, bundle: str) -> bool:
        return bundle in (self.ignored_bundles.get(entity_type) or [])

    def is_field_ignored(self, entity_type: str, field_name: str) -> bool:
        return field_name in (self.ignored_fields.get(entity_type) or [])


class MockDataCatalog(BaseModel):
    """drupal_regression.mock_data"""
    fields: MockTable = Field(default_factory=dict)
    entity_reference_target_types: MockTable = Field(default_factory=dict)
    field_types: MockTable = Field(default_factory=dict)


class MessagesOut(BaseModel):
    warnings: List[str] = []
    errors: List[str] = []


class EndpointOut(BaseModel):
    file: str = Field(..., examples=["node--article.html"])
    url: str = Field(..., examples=["/api/regression/content/node/12"])


class ContentManifestResponse(BaseModel):
    generated: str = Field(..., examples=["2026-01-07 10:15:00"])
    messages: MessagesOut
    endpoints: Dict[str, EndpointOut] = {}
