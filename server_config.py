"""
Settings for the task server and its MCP bridge.
"""

import os

HOST = os.getenv("TASK_SERVER_HOST", "0.0.0.0")
PORT = int(os.getenv("TASK_SERVER_PORT", "8012"))
DEBUG = os.getenv("TASK_SERVER_DEBUG", "").lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("TASK_SERVER_LOG_LEVEL", "INFO").upper()

# Base URL the MCP bridge uses to reach the HTTP API
TASK_API_URL = os.getenv("TASK_API_URL", f"http://localhost:{PORT}").rstrip("/")

STUDENT_ID = "500230292"
GITHUB_REPO_URL = "https://github.com/hammadCodes/goCRUDDocker"

API_GUIDE_MESSAGE = """
This is a simple to-do task server. It allows you to perform CRUD (Create, Read, Update, Delete) operations on tasks.

- To view this guide, send a GET request to /.
- To view all tasks, send a GET request to /tasks.
- To create a new task, send a POST request to /tasks with a JSON body containing "title" and "status" fields.
    Example: {{"title": "Task 1", "status": "pending"}}
- To update a task, send a PUT request to /task/{{id}} with the updated task details in the JSON body.
- To delete a task, send a DELETE request to /task/{{id}}.

More documentation on GitHub: https://github.com/hammadCodes/goCRUDDocker
More documentation on Docker Hub: https://hub.docker.com/repository/docker/hammadcodes/gocruddocker/general

Student ID: {student_id}
GitHub Repository: {repo_url}
"""
