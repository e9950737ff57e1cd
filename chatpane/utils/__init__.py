from .session_log import SessionLogPaths, append_snapshot, init_session_log, make_session_id

__all__ = ["SessionLogPaths", "append_snapshot", "init_session_log", "make_session_id"]
