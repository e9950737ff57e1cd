from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from chatpane.schema import ChatState


@dataclass(frozen=True)
class SessionLogPaths:
    session_id: str
    jsonl_path: Path


def make_session_id() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")


def init_session_log(log_dir: Path, session_id: str) -> SessionLogPaths:
    log_dir.mkdir(parents=True, exist_ok=True)
    return SessionLogPaths(session_id=session_id, jsonl_path=log_dir / f"session_{session_id}.jsonl")


def append_snapshot(
    paths: SessionLogPaths,
    state: ChatState,
    *,
    extra: dict[str, Any] | None = None,
) -> None:
    """Append one JSON line with the transcript as it stands now."""
    payload: dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "session_id": paths.session_id,
        "state": state.model_dump(mode="json", exclude={"pending_input"}),
    }
    if state.messages:
        payload["last_message"] = state.messages[-1].model_dump(mode="json")
    if extra:
        payload.update(extra)
    with paths.jsonl_path.open("a", encoding="utf-8", newline="\n") as f:
        f.write(json.dumps(payload, ensure_ascii=False) + "\n")

