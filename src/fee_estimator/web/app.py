"""Flask JSON API for fee estimates."""

from flask import Flask, current_app, jsonify, request

from fee_estimator.core.config import find_schedule_path
from fee_estimator.core.errors import InvalidInputError
from fee_estimator.core.logger import get_logger
from fee_estimator.core.response import ApiResponse
from fee_estimator.engine.evaluator import FeeEvaluator
from fee_estimator.engine.result import FeeResult
from fee_estimator.formatting.currency import format_currency, parse_currency_input
from fee_estimator.reporting.tables import reference_table
from fee_estimator.schedule.bands import FeeSchedule
from fee_estimator.schedule.loader import DEFAULT_SCHEDULE, load_schedule

logger = get_logger("web.app")


def create_app(config: dict | None = None) -> Flask:
    app = Flask(__name__)
    app.config["TESTING"] = False
    app.config["FEE_SCHEDULE_PATH"] = None
    if config:
        app.config.update(config)

    app.config["FEE_EVALUATOR"] = FeeEvaluator(_resolve_schedule(app))
    _register_routes(app)
    return app


def _resolve_schedule(app: Flask) -> FeeSchedule:
    if isinstance(app.config.get("FEE_SCHEDULE"), FeeSchedule):
        return app.config["FEE_SCHEDULE"]
    path = find_schedule_path(app.config.get("FEE_SCHEDULE_PATH"))
    if path is not None:
        return load_schedule(str(path))
    logger.info("No fee schedule config found, using built-in schedule")
    return DEFAULT_SCHEDULE


def _evaluator() -> FeeEvaluator:
    return current_app.config["FEE_EVALUATOR"]


def _read_enterprise_value(body: dict) -> float:
    if "enterprise_value" not in body:
        raise InvalidInputError("enterprise_value is required")
    raw = body["enterprise_value"]
    if isinstance(raw, str):
        if not raw.strip():
            raise InvalidInputError("enterprise_value cannot be empty")
        return parse_currency_input(raw)
    return raw


def _formatted(result: FeeResult) -> dict:
    return {
        "enterprise_value": format_currency(result.enterprise_value),
        "total_fee": format_currency(result.total_fee),
        "percentage_of_ev": f"{result.percentage_of_ev:.2f}%",
        "breakdown": [
            {
                "band_label": row.band_label,
                "ev_in_band": format_currency(row.ev_in_band),
                "sliding_scale_fee": format_currency(row.sliding_scale_fee),
                "fixed_fees_applied": {
                    name: format_currency(amount)
                    for name, amount in row.fixed_fees_applied.items()
                },
            }
            for row in result.breakdown
        ],
    }


def _register_routes(app: Flask) -> None:
    @app.route("/api/health")
    def health():
        return jsonify(ApiResponse.success(data={"status": "ok"}).to_dict())

    @app.route("/api/fees/estimate", methods=["POST"])
    def estimate_fees():
        try:
            body = request.get_json(silent=True) or {}
            if not isinstance(body, dict):
                body = {}
            ev = _read_enterprise_value(body)
            result = _evaluator().evaluate(ev)
            if not result.is_eligible:
                return jsonify(
                    ApiResponse.warning(
                        data=result.to_dict(),
                        message=(
                            "Enterprise value is below the minimum of "
                            f"{format_currency(result.floor)}"
                        ),
                    ).to_dict()
                )
            data = result.to_dict()
            data["formatted"] = _formatted(result)
            return jsonify(ApiResponse.success(data=data).to_dict())
        except InvalidInputError as e:
            return jsonify(ApiResponse.error(str(e)).to_dict()), 400
        except Exception as e:
            logger.error(f"Fee estimate error: {e}")
            return jsonify(ApiResponse.error(str(e)).to_dict()), 500

    @app.route("/api/fees/schedule")
    def fee_schedule():
        try:
            schedule = _evaluator().schedule
            table = reference_table(schedule)
            return jsonify(
                ApiResponse.success(
                    data={
                        "floor": schedule.floor,
                        "cap": schedule.cap,
                        "components": list(schedule.component_names),
                        "rows": table.to_dict(orient="records"),
                    }
                ).to_dict()
            )
        except Exception as e:
            logger.error(f"Fee schedule error: {e}")
            return jsonify(ApiResponse.error(str(e)).to_dict()), 500
