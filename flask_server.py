"""
A simple Flask app exposing an in-memory to-do task API:

    GET    /            usage guide
    GET    /tasks       list tasks
    POST   /tasks       create a task
    PUT    /task/<id>   replace a task's title and status
    DELETE /task/<id>   delete a task
"""

import logging
from typing import Optional

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import BadRequest, MethodNotAllowed

import server_config
from task_store import TaskDecodeError, TaskNotFoundError, TaskStore, decode_task

logger = logging.getLogger(__name__)

TASKS_METHODS = ["GET", "POST"]


def _plain_text(body, status):
    return Response(body, status=status, mimetype="text/plain")


def create_app(store: Optional[TaskStore] = None) -> Flask:
    app = Flask(__name__)
    app.config["TASK_STORE"] = store if store is not None else TaskStore()
    tasks = app.config["TASK_STORE"]

    @app.before_request
    def reject_head_on_tasks():
        # Flask answers HEAD through the GET rule; /tasks only serves GET and POST
        if request.method == "HEAD" and request.url_rule is not None \
                and request.url_rule.rule == "/tasks":
            raise MethodNotAllowed(valid_methods=TASKS_METHODS)

    @app.errorhandler(BadRequest)
    def handle_bad_json(e):
        # Outside debug mode Flask re-raises a generic BadRequest from the decode error
        if isinstance(e.__cause__, BadRequest):
            e = e.__cause__
        logger.warning(f"Rejected {request.method} {request.path}: {e.description}")
        return _plain_text(e.description, 400)

    @app.errorhandler(TaskDecodeError)
    def handle_bad_task(e):
        logger.warning(f"Rejected {request.method} {request.path}: {e}")
        return _plain_text(str(e), 400)

    @app.errorhandler(TaskNotFoundError)
    def handle_not_found(e):
        logger.warning(f"{request.method} {request.path}: no task with id {e.task_id!r}")
        return _plain_text(str(e), 404)

    @app.errorhandler(MethodNotAllowed)
    def handle_method_not_allowed(e):
        response = Response(status=405)
        if e.valid_methods:
            response.headers["Allow"] = ", ".join(e.valid_methods)
        return response

    @app.route("/", methods=["GET"])
    def guide():
        message = server_config.API_GUIDE_MESSAGE.format(
            student_id=server_config.STUDENT_ID,
            repo_url=server_config.GITHUB_REPO_URL,
        )
        return _plain_text(message, 200)

    @app.route("/tasks", methods=["GET"], provide_automatic_options=False)
    def list_tasks():
        return jsonify(tasks.list_tasks())

    @app.route("/tasks", methods=["POST"], provide_automatic_options=False)
    def create_task():
        new_task = tasks.add_task(decode_task(request.get_json(force=True)))
        logger.info(f"Created task {new_task['id']}")
        return jsonify(new_task), 201

    @app.route("/task/<task_id>", methods=["PUT"], provide_automatic_options=False)
    def update_task(task_id):
        # Decode first: a bad body is a 400 even for an unknown id
        updated = tasks.update_task(task_id, decode_task(request.get_json(force=True)))
        logger.info(f"Updated task {task_id}")
        return jsonify(updated)

    @app.route("/task/<task_id>", methods=["DELETE"], provide_automatic_options=False)
    def delete_task(task_id):
        tasks.delete_task(task_id)
        logger.info(f"Deleted task {task_id}")
        return "", 200

    return app


app = create_app()


def main():
    logging.basicConfig(level=server_config.LOG_LEVEL)
    logger.info(f"Server is starting on port: {server_config.PORT}")
    app.run(
        host=server_config.HOST,
        port=server_config.PORT,
        debug=server_config.DEBUG,
        threaded=True,
        use_reloader=False,
    )


if __name__ == "__main__":
    main()
