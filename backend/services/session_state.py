"""Session state owned by the app: loaded once at startup, changed only by login/logout."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from models.schemas.session import SessionState, User

logger = logging.getLogger(__name__)


class SessionStore:
    """Holds the current SessionState and mirrors it to a JSON file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._state = self._load()

    @property
    def state(self) -> SessionState:
        return self._state

    def _load(self) -> SessionState:
        if not self._path.exists():
            return SessionState()
        try:
            state = SessionState.model_validate_json(self._path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            logger.error("Error reading persisted session from %s: %s", self._path, e)
            self._remove_file()
            return SessionState()
        logger.info("Restored session for %s", state.current_user.email if state.current_user else "anonymous")
        return state

    def _remove_file(self) -> None:
        try:
            self._path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not remove session file %s: %s", self._path, e)

    def login(self, user: User, token: str) -> SessionState:
        if not token:
            raise ValueError("Auth token must not be empty")
        state = SessionState(current_user=user, auth_token=token)
        # Persist first: a failed write keeps the previous session
        self._path.write_text(json.dumps(state.model_dump(mode="json")), encoding="utf-8")
        self._state = state
        logger.info("Logged in %s", user.email)
        return self._state

    def logout(self) -> SessionState:
        if self._state.current_user is not None:
            logger.info("Logged out %s", self._state.current_user.email)
        self._state = SessionState()
        self._remove_file()
        return self._state
