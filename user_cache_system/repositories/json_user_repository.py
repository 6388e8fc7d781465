"""
JSON file user repository.

Stores users in a single JSON document of the form::

    {"users": [{"id": ..., "client": {...}, "email": ..., ...}]}

The whole file is read on every call. Keys use the camelCase names of the
file format (dateOfBirth, hasCreditLimit, creditLimit).
"""

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional
from pydantic import ValidationError
from ..exceptions import RepositoryError
from ..interfaces.repository import IUserRepository
from ..models.user import User

logger = logging.getLogger(__name__)


class JsonUserRepository(IUserRepository):
    """
    IUserRepository backed by a JSON file.

    Read-modify-write cycles are serialised with a lock local to this
    repository. Storage errors are raised as RepositoryError.
    """

    def __init__(self, db_file_path: str = "./data/db.json"):
        """
        Initialize the repository.

        Args:
            db_file_path: Path to the JSON database file
        """
        self.db_path = Path(db_file_path)
        self._write_lock = threading.Lock()

    def find_by_id(self, user_id: str) -> Optional[User]:
        return next((u for u in self.find_all() if u.id == user_id), None)

    def find_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.find_all() if u.email == email), None)

    def find_all(self) -> List[User]:
        logger.debug(f"Loading users from {self.db_path}")
        if not self.db_path.exists():
            logger.warning(f"Database file not found: {self.db_path}")
            return []

        users = []
        for i, record in enumerate(self._read_document().get("users", [])):
            try:
                users.append(User.model_validate(record))
            except ValidationError as e:
                logger.warning(f"Skipping invalid user record #{i}: {e}")

        logger.debug(f"Loaded {len(users)} users from database")
        return users

    def save(self, user: User) -> bool:
        logger.debug(f"Saving user: id={user.id}, email={user.email}")
        with self._write_lock:
            document = self._read_document() if self.db_path.exists() else {}
            document.setdefault("users", []).append(self._to_record(user))
            self._write_document(document)

        logger.info(f"User saved successfully: id={user.id}")
        return True

    def update(self, user: User) -> bool:
        logger.debug(f"Updating user: id={user.id}")
        with self._write_lock:
            if not self.db_path.exists():
                logger.warning(f"Cannot update user {user.id}: database file not found")
                return False

            document = self._read_document()
            records = document.get("users", [])
            for i, record in enumerate(records):
                if record.get("id") == user.id:
                    records[i] = self._to_record(user)
                    break
            else:
                logger.warning(f"User not found for update: id={user.id}")
                return False

            self._write_document(document)

        logger.info(f"User updated successfully: id={user.id}")
        return True

    def exists_by_email(self, email: str) -> bool:
        return self.find_by_email(email) is not None

    def _read_document(self) -> Dict[str, Any]:
        try:
            with open(self.db_path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load users from {self.db_path}: {e}")
            raise RepositoryError(f"Cannot read {self.db_path}: {e}") from e

        if not isinstance(document, dict) or not isinstance(document.get("users", []), list):
            logger.error(f"Unexpected document layout in {self.db_path}")
            raise RepositoryError(f"{self.db_path} does not contain a users list")
        return document

    def _write_document(self, document: Dict[str, Any]) -> None:
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.db_path, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2)
        except OSError as e:
            logger.error(f"Failed to write users to {self.db_path}: {e}")
            raise RepositoryError(f"Cannot write {self.db_path}: {e}") from e

    @staticmethod
    def _to_record(user: User) -> Dict[str, Any]:
        return user.model_dump(mode="json", by_alias=True)
