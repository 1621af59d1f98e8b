from typing import Any, Dict, List, Optional
import asyncio
import json

from fastapi import WebSocket

from devport.core.constants import WSMessageType
from devport.core.logging import log
from devport.lib.monitoring import set_relay_connections


class ProjectRelay:
    """
    Process-wide WebSocket relay for live file edits.

    - A client joins a project group with {"type": "join_project", "projectId": X}.
    - A {"type": "file_change", ...} frame is re-sent verbatim to every other
      connection in the sender's group.
    - Nothing is persisted or replayed; a dropped client misses edits.
    """

    def __init__(self) -> None:
        # websocket -> joined project id (None until join_project)
        self.connections: Dict[WebSocket, Optional[Any]] = {}
        self._lock = asyncio.Lock()

    async def connect(self, websocket: WebSocket) -> None:
        await websocket.accept()
        async with self._lock:
            self.connections[websocket] = None
            set_relay_connections(len(self.connections))
        log("WS", f"Client connected ({len(self.connections)} open)")

    async def disconnect(self, websocket: WebSocket) -> None:
        async with self._lock:
            self.connections.pop(websocket, None)
            set_relay_connections(len(self.connections))
        log("WS", f"Client disconnected ({len(self.connections)} open)")

    def project_of(self, websocket: WebSocket) -> Optional[Any]:
        return self.connections.get(websocket)

    async def join(self, websocket: WebSocket, project_id: Any) -> None:
        async with self._lock:
            self.connections[websocket] = project_id
        log("RELAY", "Joined project", project_id=project_id)
        await websocket.send_json({"type": WSMessageType.JOINED.value, "projectId": project_id})

    async def relay(self, sender: WebSocket, raw: str) -> int:
        """
        Send `raw` to every other member of the sender's project group.
        Returns the number of peers it reached.
        """
        project_id = self.project_of(sender)
        if project_id is None:
            return 0

        # Snapshot under lock; send outside it
        async with self._lock:
            peers = [
                ws for ws, joined in self.connections.items()
                if ws is not sender and joined == project_id
            ]

        delivered = 0
        dead: List[WebSocket] = []
        for ws in peers:
            try:
                await ws.send_text(raw)
                delivered += 1
            except Exception:
                dead.append(ws)

        for ws in dead:
            await self.disconnect(ws)

        log("RELAY", f"file_change -> {delivered} peer(s)", project_id=project_id)
        return delivered

    async def handle_frame(self, websocket: WebSocket, raw: Optional[str]) -> None:
        """Dispatch one incoming frame; malformed frames are logged and dropped."""
        try:
            data = json.loads(raw) if raw is not None else None
        except (TypeError, ValueError) as e:
            log("WS", f"Dropped malformed frame: {e}")
            return

        if not isinstance(data, dict):
            log("WS", "Dropped frame that is not a JSON object")
            return

        msg_type = data.get("type")
        if msg_type == WSMessageType.JOIN_PROJECT.value:
            await self.join(websocket, data.get("projectId"))
        elif msg_type == WSMessageType.FILE_CHANGE.value:
            await self.relay(websocket, raw)

    async def serve(self, websocket: WebSocket) -> None:
        """Run one connection until the client goes away."""
        await self.connect(websocket)
        try:
            while True:
                message = await websocket.receive()
                if message["type"] == "websocket.disconnect":
                    break
                raw = message.get("text")
                if raw is None and message.get("bytes") is not None:
                    raw = message["bytes"].decode("utf-8", errors="replace")
                await self.handle_frame(websocket, raw)
        finally:
            await self.disconnect(websocket)


relay = ProjectRelay()
