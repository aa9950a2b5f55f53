"""ca_records REST endpoints.

GET /records/{namespace}/{record_id}   cache-aside read of one record
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.ca_common.errors import RecordNotFoundError
from src.ca_common.response import ApiResponse, success_response
from src.ca_records.api.dependencies import get_resolver
from src.ca_records.api.schemas import RecordOut
from src.ca_records.application.resolver import ReadThroughResolver

router = APIRouter(prefix="/records", tags=["records"])


@router.get("/{namespace}/{record_id}")
async def get_record(
    namespace: str,
    record_id: int,
    request: Request,
    resolver: Annotated[ReadThroughResolver, Depends(get_resolver)],
) -> ApiResponse:
    lookup = await resolver.resolve(namespace, record_id)
    request.state.cache_status = lookup.status.value
    if not lookup.found:
        raise RecordNotFoundError(namespace, record_id)
    resp = success_response(RecordOut.from_lookup(lookup).model_dump(mode="json"))
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
