from __future__ import annotations
import logging
from datetime import datetime
from typing import Dict, List
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from drupal_regression.api.deps import (
    get_bundle_info,
    get_content_generator,
    get_entity_type_manager,
    get_state_store,
    require_enabled,
)
from drupal_regression.core.errors import EntityNotFoundError
from drupal_regression.entity.field_manager import EntityTypeBundleInfo
from drupal_regression.entity.manager import CONTENT_ENTITY_TYPES, EntityTypeManager
from drupal_regression.generators.content_generator import ContentGenerator
from drupal_regression.generators.types import GenerationMessages
from drupal_regression.render.sanitizer import sanitize_markup
from drupal_regression.schemas.regression import ContentManifestResponse, EndpointOut, MessagesOut
from drupal_regression.state import ENDPOINTS_STATE_KEY, StateStore

log = logging.getLogger(__name__)

ACCESS_DENIED_MESSAGE = "You dont have access to view this."

router = APIRouter(prefix="/api/regression", dependencies=[Depends(require_enabled)])


@router.get("/content", response_model=ContentManifestResponse)
def get_all(
    bundle_info: EntityTypeBundleInfo = Depends(get_bundle_info),
    generator: ContentGenerator = Depends(get_content_generator),
    state: StateStore = Depends(get_state_store),
):
    """Generate one mock entity per node and paragraph bundle and list their URLs."""
    endpoints: Dict[str, List[int]] = {}
    endpoint_urls: Dict[str, EndpointOut] = {}
    messages = GenerationMessages()

    for entity_type in CONTENT_ENTITY_TYPES:
        for bundle in bundle_info.get_bundle_info(entity_type):
            result = generator.generate(entity_type, bundle)
            messages.extend(result.messages)

            if result.entity is None:
                continue

            entity_id = result.entity.id
            endpoints.setdefault(entity_type, []).append(entity_id)

            file_name = f"{entity_type}--{bundle}.html"
            endpoint_urls[file_name] = EndpointOut(
                file=file_name,
                url=f"/api/regression/content/{entity_type}/{entity_id}",
            )

    # Saving the endpoints, so access can be checked when they are fetched.
    state.set(ENDPOINTS_STATE_KEY, endpoints)

    log.info(
        "Generated %d entities (%d warnings, %d errors)",
        len(endpoint_urls), len(messages.warnings), len(messages.errors),
    )

    return ContentManifestResponse(
        generated=datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        messages=MessagesOut(**messages.to_dict()),
        endpoints=endpoint_urls,
    )


@router.get("/content/{entity_type}/{entity_id}")
def get_content(
    entity_type: str,
    entity_id: int,
    request: Request,
    entity_type_manager: EntityTypeManager = Depends(get_entity_type_manager),
    state: StateStore = Depends(get_state_store),
):
    """Render a single generated entity with session-specific noise removed."""
    # Only entities from the latest generation pass are exposed.
    endpoints = state.get(ENDPOINTS_STATE_KEY, {}) or {}
    if entity_id not in (endpoints.get(entity_type) or []):
        log.warning("Denied access to %s", entity_id, extra={"entity_type": entity_type})
        return PlainTextResponse(ACCESS_DENIED_MESSAGE, status_code=403)

    entity = entity_type_manager.get_storage(entity_type).load(entity_id)
    if entity is None:
        raise EntityNotFoundError(entity_type, entity_id)

    view_builder = entity_type_manager.get_view_builder(entity_type, str(request.base_url))
    markup = view_builder.view(entity)

    markup = sanitize_markup(markup, entity_id, request.headers.get("host"))

    return HTMLResponse(markup, status_code=200)
