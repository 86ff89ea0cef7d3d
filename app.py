import logging
from datetime import date, datetime, timezone

from flask import Flask, Response, abort, jsonify, render_template, request
from flask_cors import CORS

from config import JOIN_MODE, LOG_LEVEL, PORT, REPORT_WEEKS, WEEK_ORDERING
from dashboard_engine import calculate_today_stats, get_recent_logs, get_upcoming_medications
from database import COLLECTION_NAMES, init_db
from export_service import EXPORT_FILENAME, EXPORT_MIMETYPE, export_logs_csv
from models import get_collection, load_snapshot, save_collection
from report_engine import build_adherence_report

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
CORS(app)


@app.before_request
def setup_database_once():
    init_db()


def _requested_day():
    value = request.args.get("date", "").strip()
    if not value:
        return datetime.now(timezone.utc).date().isoformat()
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        abort(400, description="date must be YYYY-MM-DD")


def _report_options():
    return {
        "join": request.args.get("join", JOIN_MODE),
        "ordering": request.args.get("ordering", WEEK_ORDERING),
        "weeks": REPORT_WEEKS,
    }


def _build_report():
    try:
        return build_adherence_report(load_snapshot(), **_report_options())
    except ValueError as exc:
        abort(400, description=str(exc))


def _build_dashboard(today):
    snapshot = load_snapshot()
    return {
        "date": today,
        "stats": calculate_today_stats(
            snapshot["patients"], snapshot["medications"], snapshot["logs"], today
        ),
        "recentLogs": get_recent_logs(snapshot["logs"]),
        "upcomingMedications": get_upcoming_medications(snapshot["medications"], today),
    }


@app.route("/")
def dashboard_page():
    return render_template("dashboard.html", dashboard=_build_dashboard(_requested_day()))


@app.route("/reports")
def reports_page():
    return render_template("reports.html", report=_build_report())


@app.route("/reports/export")
def export_logs():
    csv_text = export_logs_csv(get_collection("logs"))
    return Response(
        csv_text,
        mimetype=EXPORT_MIMETYPE,
        headers={"Content-Disposition": f"attachment; filename={EXPORT_FILENAME}"},
    )


@app.route("/api/dashboard")
def dashboard_api():
    return jsonify(_build_dashboard(_requested_day()))


@app.route("/api/reports")
def reports_api():
    return jsonify(_build_report())


@app.route("/api/reports/patients")
def patient_report_api():
    return jsonify(_build_report()["patients"])


@app.route("/api/reports/medications")
def medication_report_api():
    return jsonify(_build_report()["medications"])


@app.route("/api/reports/weekly")
def weekly_report_api():
    return jsonify(_build_report()["weeklyTrends"])


@app.route("/api/collections/<name>", methods=["GET", "PUT"])
def collection_api(name):
    if name not in COLLECTION_NAMES:
        abort(404)

    if request.method == "PUT":
        records = request.get_json(silent=True)
        if not isinstance(records, list):
            abort(400, description="Body must be a JSON array of records.")
        save_collection(name, records)
        return jsonify({"name": name, "count": len(records)})

    return jsonify(get_collection(name))


if __name__ == "__main__":
    init_db()
    logger.info("Starting medication log server on port %s", PORT)
    app.run(host="0.0.0.0", port=PORT)
