import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from capstone_catalog.backend.app.api.v1.projects.mappers import projects_dtos_to_snapshot
from capstone_catalog.backend.app.application.projects.dto import ProjectDTO

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.websocket("/feed")
async def projects_feed(websocket: WebSocket):
    """
    Live project list. Sends a full snapshot on connect and after every change;
    the subscription is closed as soon as the client goes away.
    """
    await websocket.accept()
    feed = websocket.app.state.project_feed

    async def push(projects: list[ProjectDTO]) -> None:
        message = projects_dtos_to_snapshot(projects)
        await websocket.send_json(message.model_dump(mode="json"))

    subscription = await feed.subscribe(push)
    logger.info("Feed client connected (%d listening)", feed.listener_count)
    try:
        while True:
            # clients do not send anything meaningful; this only detects disconnects
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.info("Feed client disconnected")
    finally:
        subscription.close()
