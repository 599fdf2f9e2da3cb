"""
User Store

Persistence for user accounts and game counters in the MongoDB ``users``
collection. Password hashing happens here so a plaintext password never
reaches the database.
"""

import re
from typing import List, Optional

import bcrypt
from bson.errors import InvalidId
from bson.objectid import ObjectId
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from ..config.game_settings import PASSWORD_MIN_LENGTH, USERNAME_MIN_LENGTH
from ..exceptions import DuplicateUserError, InvalidArgument, UserNotFound, UserValidationError
from ..models import User

EMAIL_PATTERN = re.compile(r'.+@.+\..+')

COUNTER_FIELDS = (
    'higherLowerGamesPlayed',
    'higherLowerGameHighestScore',
    'draftGamesPlayed',
    'draftGameWins',
    'draftGameLosses',
)


def _object_id(user_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(user_id)
    except (InvalidId, TypeError):
        return None


class UserStore:
    """
    User account store.

    All counter updates are single atomic MongoDB operations; nothing here
    reads a counter and writes it back.
    """

    def __init__(self, collection: Collection, bcrypt_rounds: int = 12):
        self.collection = collection
        self.bcrypt_rounds = bcrypt_rounds

        # Unique constraints on login identifiers
        self.collection.create_index("email", unique=True)
        self.collection.create_index("username", unique=True)

    def hash_password(self, password: str) -> str:
        """
        Hash a password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Hashed password as string
        """
        salt = bcrypt.gensalt(rounds=self.bcrypt_rounds)
        hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
        return hashed.decode('utf-8')

    def verify_password(self, password: str, hashed_password: Optional[str]) -> bool:
        """Verify a password against its hash."""
        if not isinstance(password, str) or not password or not hashed_password:
            return False
        return bcrypt.checkpw(password.encode('utf-8'), hashed_password.encode('utf-8'))

    def _validate_password(self, password: str) -> None:
        if not isinstance(password, str) or len(password) < PASSWORD_MIN_LENGTH:
            raise UserValidationError(
                f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
            )

    def create_user(self, email: str, username: str, password: str) -> User:
        """
        Create a user with zeroed counters.

        Raises:
            UserValidationError: If a field fails validation
            DuplicateUserError: If the email or username is taken
        """
        for value in (email, username, password):
            if value is not None and not isinstance(value, str):
                raise UserValidationError("Email, username and password must be strings")

        email = (email or '').strip()
        username = (username or '').strip()

        if not email or not username or not password:
            raise UserValidationError("Email, username and password are required")
        if not EMAIL_PATTERN.search(email):
            raise UserValidationError("Must match an email address!")
        if len(username) < USERNAME_MIN_LENGTH:
            raise UserValidationError(
                f"Username must be at least {USERNAME_MIN_LENGTH} characters long"
            )
        self._validate_password(password)

        if self.collection.find_one({"email": email}):
            raise DuplicateUserError("Email already exists")
        if self.collection.find_one({"username": username}):
            raise DuplicateUserError("Username already exists")

        user_doc = {
            "email": email,
            "username": username,
            "password": self.hash_password(password),
        }
        user_doc.update({field: 0 for field in COUNTER_FIELDS})

        try:
            result = self.collection.insert_one(user_doc)
        except DuplicateKeyError as e:
            # Lost a race against a concurrent signup
            raise DuplicateUserError("Email or username already exists") from e

        user_doc["_id"] = result.inserted_id
        return User.from_document(user_doc)

    def find_by_id(self, user_id: str) -> Optional[User]:
        oid = _object_id(user_id)
        if oid is None:
            return None
        doc = self.collection.find_one({"_id": oid})
        return User.from_document(doc) if doc else None

    def find_by_username(self, username: str) -> Optional[User]:
        if not isinstance(username, str) or not username:
            return None
        doc = self.collection.find_one({"username": username.strip()})
        return User.from_document(doc) if doc else None

    def list_users(self) -> List[User]:
        return [User.from_document(doc) for doc in self.collection.find()]

    def change_password(self, user_id: str, new_password: str) -> bool:
        """
        Replace a user's password.

        The stored hash is only rewritten when the new plaintext differs from
        the current one.

        Returns:
            True if the hash changed, False if the password was unchanged
        """
        self._validate_password(new_password)
        user = self.find_by_id(user_id)
        if user is None:
            raise UserNotFound("User not found")
        if self.verify_password(new_password, user.password_hash):
            return False

        self.collection.update_one(
            {"_id": ObjectId(user.id)},
            {"$set": {"password": self.hash_password(new_password)}}
        )
        return True

    def increment_and_raise_max(self,
                                user_id: str,
                                counter_field: str,
                                max_field: str,
                                candidate_value: int) -> Optional[User]:
        """
        Atomically increment ``counter_field`` and raise ``max_field`` to
        ``candidate_value`` if the candidate is greater.

        Returns:
            The updated user, or None if no such user exists
        """
        if counter_field not in COUNTER_FIELDS or max_field not in COUNTER_FIELDS:
            raise InvalidArgument(f"Unknown counter field: {counter_field} / {max_field}")

        oid = _object_id(user_id)
        if oid is None:
            return None

        doc = self.collection.find_one_and_update(
            {"_id": oid},
            {
                "$inc": {counter_field: 1},
                "$max": {max_field: candidate_value},
            },
            return_document=ReturnDocument.AFTER
        )
        return User.from_document(doc) if doc else None

    def record_draft_result(self, user_id: str, won: bool) -> Optional[User]:
        """Count one draft game as exactly one win or one loss."""
        oid = _object_id(user_id)
        if oid is None:
            return None

        doc = self.collection.find_one_and_update(
            {"_id": oid},
            {
                "$inc": {
                    "draftGamesPlayed": 1,
                    "draftGameWins": 1 if won else 0,
                    "draftGameLosses": 0 if won else 1,
                }
            },
            return_document=ReturnDocument.AFTER
        )
        return User.from_document(doc) if doc else None


# Global store instance
_user_store = None


def get_user_store() -> Optional[UserStore]:
    """Get the global user store instance."""
    return _user_store


def initialize_user_store(collection: Collection, bcrypt_rounds: int = 12) -> UserStore:
    """Initialize the global user store instance."""
    global _user_store
    _user_store = UserStore(collection, bcrypt_rounds)
    return _user_store
