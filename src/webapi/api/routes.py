"""
HTTP routes: one router per collection, all built by the same factory.

    GET    /cars?ids=1&ids=2   -> [{"id": 1, "name": "Volvo"}, ...]
    POST   /cars               -> {"errorCode": 0, "ids": [1, 2]}
    PUT    /cars               -> {"errorCode": 0}
    DELETE /cars?ids=1&ids=2   -> {"errorCode": 2, "errorName": "NotFoundError"}

The reply body is authoritative; the status code only mirrors it.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from webapi.collections import DataContext, RecordCollection
from webapi.entities import Car, EntityRecord, ErrorDefinition, Subscription, User
from webapi.errors.codes import http_status_for
from webapi.replies import AddReply, Outcome, Reply, dump_reply
from .dependencies import get_context


def _respond(reply: Reply, outcome: Outcome) -> JSONResponse:
    return JSONResponse(status_code=http_status_for(outcome.code), content=dump_reply(reply))


def collection_router(attr: str, record_type: type[EntityRecord], *, writable: bool = True) -> APIRouter:
    """
    Build the router for `DataContext.<attr>`.

    `record_type` is the request/response model; read-only collections
    (writable=False) expose GET only.
    """
    router = APIRouter(prefix=f"/{attr}", tags=[attr])

    def collection(context: DataContext = Depends(get_context)) -> RecordCollection:
        return getattr(context, attr)

    @router.get("", response_model=list[record_type])
    async def list_records(
        ids: list[int] | None = Query(default=None),
        records: RecordCollection = Depends(collection),
    ):
        return await records.get(ids)

    if not writable:
        return router

    @router.post("", response_model=AddReply)
    async def add_records(
        items: list[record_type],
        records: RecordCollection = Depends(collection),
        context: DataContext = Depends(get_context),
    ):
        outcome = await records.add(items)
        return _respond(context.replies.add_reply(outcome), outcome)

    @router.put("", response_model=Reply)
    async def modify_records(
        items: list[record_type],
        records: RecordCollection = Depends(collection),
        context: DataContext = Depends(get_context),
    ):
        outcome = await records.modify(items)
        return _respond(context.replies.reply(outcome), outcome)

    @router.delete("", response_model=Reply)
    async def remove_records(
        ids: list[int] = Query(...),
        records: RecordCollection = Depends(collection),
        context: DataContext = Depends(get_context),
    ):
        outcome = await records.remove(ids)
        return _respond(context.replies.reply(outcome), outcome)

    return router


cars_router = collection_router("cars", Car)
users_router = collection_router("users", User)
subscriptions_router = collection_router("subscriptions", Subscription)
errors_router = collection_router("errors", ErrorDefinition, writable=False)

ROUTERS = [cars_router, users_router, subscriptions_router, errors_router]
