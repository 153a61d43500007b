"""
Flask application for the printer operator panel.
"""
import threading

from flask import Flask, jsonify, request

from controller.printer import Printer


def create_app(printer: Printer | None = None):
    app = Flask(__name__)

    if printer is None:
        printer = Printer()

    app.printer = printer

    # Printer is not thread-safe; every request goes through this lock.
    printer_lock = threading.Lock()

    @app.route("/status", methods=["GET"])
    def status():
        with printer_lock:
            return jsonify(app.printer.get_status())

    @app.route("/health", methods=["GET"])
    def health():
        with printer_lock:
            return jsonify(app.printer.get_health().to_dict())

    @app.route("/jobs", methods=["GET"])
    def list_jobs():
        with printer_lock:
            return jsonify({"jobs": list(app.printer.pending_jobs())})

    @app.route("/jobs", methods=["POST"])
    def add_job():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        job = data.get("job")
        if not isinstance(job, str):
            return jsonify({"ok": False, "error": "missing_job"}), 400

        with printer_lock:
            app.printer.add_job(job)
            queued = len(app.printer.pending_jobs())

        return jsonify({"ok": True, "queued_jobs": queued}), 201

    @app.route("/process", methods=["POST"])
    def process_job():
        with printer_lock:
            app.printer.process_job()
            return jsonify(app.printer.get_status())

    @app.route("/refill", methods=["POST"])
    def refill_paper():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        amount = data.get("amount")
        if not isinstance(amount, int) or isinstance(amount, bool):
            return jsonify({"ok": False, "error": "invalid_amount"}), 400

        with printer_lock:
            app.printer.refill_paper(amount)
            return jsonify({"ok": True, "paper_count": app.printer.get_paper_count()})

    @app.route("/error", methods=["POST"])
    def set_error():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        message = data.get("message")
        if not isinstance(message, str):
            return jsonify({"ok": False, "error": "missing_message"}), 400

        with printer_lock:
            app.printer.set_error(message)
            return jsonify(app.printer.get_health().to_dict())

    return app
