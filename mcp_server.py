"""
MCP Server Wrapping the Flask task API (`mcp_server.py`)
"""

import logging
import sys

import requests
from mcp.server.fastmcp import FastMCP

from server_config import TASK_API_URL

# stdout is reserved for the stdio transport
logging.basicConfig(stream=sys.stderr, level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize MCP server
mcp = FastMCP("To-Do API MCP Server")


@mcp.resource("todo://list")
def list_tasks() -> list:
    """Fetch all tasks from the Flask API."""
    response = requests.get(f"{TASK_API_URL}/tasks")
    response.raise_for_status()
    return response.json()


@mcp.tool()
def add_task(title: str, status: str = "pending") -> dict:
    """Add a new task via the Flask API."""
    payload = {"title": title, "status": status}
    response = requests.post(f"{TASK_API_URL}/tasks", json=payload)
    response.raise_for_status()
    task = response.json()
    logger.info(f"Added task {task['id']}")
    return task


@mcp.tool()
def update_task(task_id: str, title: str, status: str) -> dict:
    """Replace the title and status of an existing task."""
    payload = {"title": title, "status": status}
    response = requests.put(f"{TASK_API_URL}/task/{task_id}", json=payload)
    response.raise_for_status()
    return response.json()


@mcp.tool()
def delete_task(task_id: str) -> dict:
    """Delete a task by id."""
    response = requests.delete(f"{TASK_API_URL}/task/{task_id}")
    response.raise_for_status()
    logger.info(f"Deleted task {task_id}")
    return {"result": "Task deleted", "id": task_id}


if __name__ == "__main__":
    # Run MCP server with stdio transport
    mcp.run(transport="stdio")
