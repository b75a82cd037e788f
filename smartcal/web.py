"""Flask JSON API over the calendar core."""

import logging
from datetime import date

import pydantic
from flask import Flask, jsonify, request

from smartcal.config import AppConfig
from smartcal.dates import add_days, parse_iso_date
from smartcal.exceptions import EventNotFoundError, StoreError, ValidationError
from smartcal.holidays import holidays_for_range, holidays_for_year
from smartcal.models.event import EventPatch, parse_user_event
from smartcal.models.notification import PermissionStatus
from smartcal.models.settings import NotificationSettings, parse_settings_update
from smartcal.occurrence import grid_start, holiday_on, month_occurrences, occurrences_for_day
from smartcal.scheduler import NotificationScheduler
from smartcal.storage.event_store import JsonEventStore
from smartcal.storage.kv_store import DedupRecordStore, LocalKeyValueStore
from smartcal.storage.settings_store import JsonSettingsStore, load_or_create, update_settings
from smartcal.summary import monthly_summary

logger = logging.getLogger(__name__)


def _dump(model) -> dict:
    return model.model_dump(mode="json")


def create_app(config: AppConfig | None = None, today=None):
    """Create the Flask app.

    Args:
        config: Application config (loaded from the environment if omitted)
        today: Optional callable returning the reference date
    """
    config = config or AppConfig.from_env()
    today_fn = today or date.today

    app = Flask(__name__)
    app.config["SMARTCAL"] = config

    event_store = JsonEventStore(config.events_path)
    settings_store = JsonSettingsStore(config.settings_path)
    dedup_store = DedupRecordStore(LocalKeyValueStore(config.local_state_path))

    def owner() -> str:
        return request.args.get("owner") or config.owner_id

    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(EventNotFoundError)
    def handle_not_found(e):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(StoreError)
    def handle_store_error(e):
        logger.error(f"Store failure: {e}")
        return jsonify({"error": str(e)}), 500

    @app.route("/api/month/<int:year>/<int:month>", methods=["GET"])
    def get_month(year: int, month: int):
        if not 1 <= month <= 12:
            raise ValidationError(f"Invalid month: {month}. Use 1-12.")
        start = grid_start(year, month)
        holidays = holidays_for_range(start, add_days(start, 41))
        cells = month_occurrences(
            year, month, event_store.list(owner()), holidays, today=today_fn()
        )
        return jsonify({"year": year, "month": month, "days": [_dump(c) for c in cells]})

    @app.route("/api/day/<day>", methods=["GET"])
    def get_day(day: str):
        target = parse_iso_date(day)
        events = occurrences_for_day(target, event_store.list(owner()))
        holiday = holiday_on(target, holidays_for_year(target.year))
        return jsonify(
            {
                "date": day,
                "events": [_dump(e) for e in events],
                "holiday": _dump(holiday) if holiday else None,
            }
        )

    @app.route("/api/holidays/<int:year>", methods=["GET"])
    def get_holidays(year: int):
        return jsonify([_dump(h) for h in holidays_for_year(year)])

    @app.route("/api/events", methods=["POST"])
    def create_event():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Expected a JSON object")
        data.setdefault("owner_id", owner())
        event = event_store.create(parse_user_event(data))
        return jsonify(_dump(event)), 201

    @app.route("/api/events/<event_id>", methods=["PATCH"])
    def patch_event(event_id: str):
        try:
            patch = EventPatch.model_validate(request.get_json(silent=True) or {})
        except pydantic.ValidationError as e:
            raise ValidationError(str(e)) from e
        return jsonify(_dump(event_store.update(event_id, patch)))

    @app.route("/api/events/<event_id>", methods=["DELETE"])
    def delete_event(event_id: str):
        event_store.delete(event_id)
        return "", 204

    @app.route("/api/settings/<owner_id>", methods=["GET"])
    def get_settings(owner_id: str):
        return jsonify(_dump(load_or_create(settings_store, owner_id)))

    @app.route("/api/settings/<owner_id>", methods=["PUT"])
    def put_settings(owner_id: str):
        try:
            settings = NotificationSettings.model_validate(request.get_json(silent=True) or {})
        except pydantic.ValidationError as e:
            raise ValidationError(str(e)) from e
        settings_store.put(owner_id, settings)
        return jsonify(_dump(settings))

    @app.route("/api/settings/<owner_id>", methods=["PATCH"])
    def patch_settings(owner_id: str):
        update = parse_settings_update(request.get_json(silent=True) or {})
        return jsonify(_dump(update_settings(settings_store, owner_id, update)))

    @app.route("/api/summary/<int:year>/<int:month>", methods=["GET"])
    def get_summary(year: int, month: int):
        summary = monthly_summary(event_store.list(owner()), year, month)
        return jsonify(_dump(summary))

    @app.route("/api/notifications/preview", methods=["GET"])
    def preview_notification():
        """What ``notify`` would dispatch today, without recording anything."""
        ref = today_fn()
        settings = load_or_create(settings_store, owner())
        target = add_days(ref, settings.advance_days)
        request_ = NotificationScheduler(dedup_store).evaluate(
            ref,
            settings,
            event_store.list(owner()),
            holidays_for_year(target.year),
            permission=PermissionStatus.GRANTED,
        )
        return jsonify(_dump(request_) if request_ else None)

    return app
