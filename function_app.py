"""Azure Functions entry point — HTTP routes for AAAA record lifecycle operations."""

import json
import logging

import azure.functions as func

from record_manager.config import AppConfig, load_config
from record_manager.dns import get_record_reconciler
from record_manager.errors import (
    InvalidResourceIdError,
    RecordAlreadyExistsError,
    RecordDeleteStatusError,
    RecordError,
    RecordNotFoundError,
    RecordValidationError,
)
from record_manager.models import AaaaRecordState
from record_manager.resource_id import format_record_id

app = func.FunctionApp(http_auth_level=func.AuthLevel.FUNCTION)

_RECORD_ROUTE = "records/aaaa/{resource_group}/{zone_name}/{name}"


def _json_response(body: dict, status_code: int = 200) -> func.HttpResponse:
    return func.HttpResponse(json.dumps(body), status_code=status_code, mimetype="application/json")


def _error_response(exc: Exception) -> func.HttpResponse:
    if isinstance(exc, (RecordValidationError, InvalidResourceIdError)):
        status_code = 400
    elif isinstance(exc, RecordNotFoundError):
        status_code = 404
    elif isinstance(exc, RecordDeleteStatusError) and exc.status_code == 204:
        # Azure DNS answers 204 when the record set was already gone.
        status_code = 404
    elif isinstance(exc, RecordAlreadyExistsError):
        status_code = 409
    else:
        status_code = 502
    logging.error("AAAA record operation failed: %s", exc)
    body = {"error": str(exc)}
    if isinstance(exc, RecordAlreadyExistsError):
        body["existing_id"] = exc.existing_id
    return _json_response(body, status_code=status_code)


def _load_config() -> tuple[AppConfig | None, func.HttpResponse | None]:
    try:
        return load_config(), None
    except ValueError as exc:
        logging.error("Invalid configuration: %s", exc)
        return None, _json_response({"error": f"Configuration error: {exc}"}, status_code=500)


def _record_id_from_route(req: func.HttpRequest, subscription_id: str) -> str:
    return format_record_id(
        subscription=subscription_id,
        resource_group=req.route_params["resource_group"],
        zone_name=req.route_params["zone_name"],
        name=req.route_params["name"],
    )


# PUT — create, update or replace a record set
@app.route(route="records/aaaa", methods=["PUT"])
def apply_aaaa_record(req: func.HttpRequest) -> func.HttpResponse:
    try:
        payload = req.get_json()
        desired = AaaaRecordState.from_dict(payload["desired"])
        prior = AaaaRecordState.from_dict(payload["prior"]) if payload.get("prior") else None
    except (ValueError, KeyError, TypeError) as exc:
        return _json_response({"error": f"Invalid request body: {exc}"}, status_code=400)

    config, error = _load_config()
    if error:
        return error
    try:
        with get_record_reconciler(config) as reconciler:
            state = reconciler.apply(desired, prior=prior, import_guard=config.import_guard)
    except (RecordError, InvalidResourceIdError) as exc:
        return _error_response(exc)
    return _json_response(state.to_dict())


# POST — adopt an existing record set by resource ID
@app.route(route="records/aaaa/import", methods=["POST"])
def import_aaaa_record(req: func.HttpRequest) -> func.HttpResponse:
    try:
        record_id = req.get_json()["id"]
    except (ValueError, KeyError, TypeError) as exc:
        return _json_response({"error": f"Invalid request body: {exc}"}, status_code=400)

    config, error = _load_config()
    if error:
        return error
    try:
        with get_record_reconciler(config) as reconciler:
            state = reconciler.import_record(record_id)
    except (RecordError, InvalidResourceIdError) as exc:
        return _error_response(exc)
    return _json_response(state.to_dict())


# GET — project the remote record set into local state
@app.route(route=_RECORD_ROUTE, methods=["GET"])
def read_aaaa_record(req: func.HttpRequest) -> func.HttpResponse:
    config, error = _load_config()
    if error:
        return error
    state = AaaaRecordState(
        name=req.route_params["name"],
        resource_group=req.route_params["resource_group"],
        zone_name=req.route_params["zone_name"],
        ttl=0,
        id=_record_id_from_route(req, config.subscription_id),
    )
    try:
        with get_record_reconciler(config) as reconciler:
            reconciler.read(state)
    except (RecordError, InvalidResourceIdError) as exc:
        return _error_response(exc)

    if state.id is None:
        return _json_response({"error": "DNS AAAA record not found"}, status_code=404)
    return _json_response(state.to_dict())


# DELETE — remove the record set
@app.route(route=_RECORD_ROUTE, methods=["DELETE"])
def delete_aaaa_record(req: func.HttpRequest) -> func.HttpResponse:
    config, error = _load_config()
    if error:
        return error
    state = AaaaRecordState(
        name=req.route_params["name"],
        resource_group=req.route_params["resource_group"],
        zone_name=req.route_params["zone_name"],
        ttl=0,
        id=_record_id_from_route(req, config.subscription_id),
    )
    try:
        with get_record_reconciler(config) as reconciler:
            reconciler.delete(state)
    except (RecordError, InvalidResourceIdError) as exc:
        return _error_response(exc)

    logging.info("Deleted DNS AAAA record %s", req.route_params["name"])
    return func.HttpResponse(status_code=204)
