"""
API Demo.

Walks a running server through the full note lifecycle: health check,
two creates, list, get, update, delete, list again, and a lookup of a
note that does not exist. Each step's response is handed to `emit`.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from notes_api.cli.client import APIClient

NOTES_PATH = "/notes"


@dataclass
class DemoStep:
    """One request of the demo and what came back."""

    title: str
    method: str
    path: str
    status_code: int
    body: Any


async def run_demo(
    client: APIClient,
    emit: Callable[[DemoStep], None],
    notes_path: str = NOTES_PATH,
) -> list[DemoStep]:
    """
    Run the demo scenario.

    Args:
        client: Client pointed at the server
        emit: Called with each step as soon as it completes
        notes_path: Path of the notes collection

    Returns:
        All executed steps in order
    """
    steps: list[DemoStep] = []

    async def step(title: str, method: str, path: str, **kwargs: Any) -> Any:
        response = await client.request(method, path, **kwargs)
        result = DemoStep(title, method, path, response.status_code, response.json())
        steps.append(result)
        emit(result)
        return result.body

    await step("Health check", "GET", "/health")

    first = await step(
        "Creating first note", "POST", notes_path,
        json={"title": "Meeting Notes", "content": "Discuss project timeline and deliverables"},
    )
    second = await step(
        "Creating second note", "POST", notes_path,
        json={"title": "Shopping List", "content": "Milk, Bread, Eggs, Coffee"},
    )
    first_id = first["data"]["id"]
    second_id = second["data"]["id"]

    await step("Getting all notes", "GET", notes_path)
    await step("Getting specific note", "GET", f"{notes_path}/{first_id}")
    await step(
        "Updating note", "PUT", f"{notes_path}/{first_id}",
        json={
            "title": "Updated Meeting Notes",
            "content": "Discuss project timeline, deliverables, and budget",
        },
    )
    await step("Deleting note", "DELETE", f"{notes_path}/{second_id}")
    await step("Getting all notes after deletion", "GET", notes_path)
    await step("Testing error case (non-existent note)", "GET", f"{notes_path}/non-existent-id")

    return steps
