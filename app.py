import logging
import os

import click
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

import config
from client.assignment_form import AssignmentForm
from database.mongo import MongoStore
from routes.assignment_routes import assignment_bp
from routes.course_routes import course_bp
from routes.quiz_routes import quiz_bp
from services.assignment_service import AssignmentService
from services.course_service import CourseService
from services.quiz_service import QuizService
from utils.errors import ClassroomError, StoreError

logger = logging.getLogger(__name__)


def configure_logging(level):
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("pymongo").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def create_app(settings=None, store=None):
    """
    Builds the Flask app. `settings` is any object with upper-case attributes
    (defaults to config.load_config()); `store` overrides the MongoStore.
    """
    app = Flask(__name__)
    app.config.from_object(settings or config.load_config())
    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    CORS(
        app,
        origins=[app.config["FRONTEND_URL"].rstrip("/")],
        supports_credentials=True,
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "user-type"],
    )

    store = store or MongoStore.from_config(app.config)
    app.extensions["mongo_store"] = store
    app.extensions["course_service"] = CourseService(store)
    app.extensions["quiz_service"] = QuizService(store)
    app.extensions["assignment_service"] = AssignmentService(store, app.config["UPLOAD_FOLDER"])

    app.register_blueprint(course_bp)
    app.register_blueprint(quiz_bp)
    app.register_blueprint(assignment_bp)

    register_error_handlers(app)
    register_commands(app)

    @app.route("/")
    def home():
        return "Classroom backend is running!"

    @app.route("/health")
    def health():
        try:
            store.ping()
        except StoreError:
            return jsonify({"backend": "running", "database": "unreachable"}), 503
        return jsonify({"backend": "running", "database": "connected"}), 200

    logger.info("App created for database '%s'", app.config["DB_NAME"])
    return app


def register_error_handlers(app):
    @app.errorhandler(ClassroomError)
    def handle_classroom_error(e):
        body = {"message": e.message}
        if getattr(e, "errors", None):
            body["errors"] = e.errors
        return jsonify(body), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"message": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.exception("Unhandled error")
        return jsonify({"message": ClassroomError.message}), 500


def register_commands(app):
    @app.cli.command("create-assignment")
    @click.option("--title", required=True)
    @click.option("--description", required=True)
    @click.option("--visible-date", required=True, help="YYYY-MM-DD")
    @click.option("--file", "file_path", required=True, type=click.Path(exists=True, dir_okay=False))
    @click.option("--backend-url", default=None, help="Defaults to BACKEND_URL.")
    def create_assignment_command(title, description, visible_date, file_path, backend_url):
        """Upload an assignment through the assignment form."""
        form = AssignmentForm(
            backend_url or app.config["BACKEND_URL"],
            on_submit=lambda created: click.echo(f"Created assignment {created.get('_id')}"),
            notify=lambda n: click.echo(f"[{n.status}] {n.title}: {n.description}"),
        )
        form.open({})
        form.set_title(title)
        form.set_description(description)
        form.set_visible_date(visible_date)
        form.select_file(file_path)
        if not form.submit():
            for field, message in form.errors.items():
                click.echo(f"{field}: {message}", err=True)
            raise SystemExit(1)


if __name__ == "__main__":
    app = create_app()
    port = int(os.environ.get("PORT", app.config["PORT"]))
    app.run(host="0.0.0.0", port=port)
