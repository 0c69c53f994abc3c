"""
User service: account registration and credential verification.
"""
import logging
import re
from typing import Any

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError
from starlette.concurrency import run_in_threadpool

from app.core.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    StorageInvariantError,
    ValidationError,
)
from app.core.security import DUMMY_PASSWORD_HASH, hash_password, verify_password
from app.database.databases import notes_db
from app.models.user import User

logger = logging.getLogger(__name__)

USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6
FULLNAME_MAX_LENGTH = 100

INVALID_CREDENTIALS = "Invalid username or password"

# Projection that never returns the password hash
PUBLIC_FIELDS = {"_id": 1, "username": 1, "fullname": 1}


def validate_user_payload(username: Any, password: Any, fullname: Any) -> None:
    """
    Check a registration payload before anything touches storage.

    Raises:
        ValidationError: On the first violated constraint
    """
    fields = {"username": username, "password": password, "fullname": fullname}

    for name, value in fields.items():
        if value is None:
            raise ValidationError(f"Failed to add user. {name} is required")

    for name, value in fields.items():
        if not isinstance(value, str):
            raise ValidationError(f"Failed to add user. {name} must be a string")

    for name, value in fields.items():
        if value.strip() == "":
            raise ValidationError(f"Failed to add user. {name} must not be blank")

    if len(username) > USERNAME_MAX_LENGTH:
        raise ValidationError(
            f"Failed to add user. username must be at most {USERNAME_MAX_LENGTH} characters"
        )

    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValidationError(
            f"Failed to add user. password must be at least {PASSWORD_MIN_LENGTH} characters"
        )

    if len(fullname) > FULLNAME_MAX_LENGTH:
        raise ValidationError(
            f"Failed to add user. fullname must be at most {FULLNAME_MAX_LENGTH} characters"
        )


class UserService:
    """Service for user identity and credential operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the notes database."""
        self.db = db
        self.users = db[notes_db.Collections.USERS]

    async def register_user(self, username: str, password: str, fullname: str) -> str:
        """
        Register a new user.

        Args:
            username: Unique username (1-50 characters)
            password: Plain password (at least 6 characters)
            fullname: Full name (1-100 characters)

        Returns:
            The new user ID

        Raises:
            ValidationError: If the payload is malformed
            ConflictError: If the username is taken
            StorageInvariantError: If the insert cannot be confirmed
        """
        validate_user_payload(username, password, fullname)
        await self.verify_new_username(username)

        user_id = f"user-{ObjectId()}"
        user_doc = {
            "_id": user_id,
            "username": username,
            "password": await run_in_threadpool(hash_password, password),
            "fullname": fullname,
        }

        # A concurrent registration can still win between the check and here;
        # the unique index turns that into DuplicateKeyError.
        try:
            result = await self.users.insert_one(user_doc)
        except DuplicateKeyError:
            raise ConflictError("Failed to add user. Username is already taken")

        if result.inserted_id != user_id:
            raise StorageInvariantError("Failed to add user")

        logger.info(f"Registered user {user_id}")
        return user_id

    async def verify_new_username(self, username: str) -> None:
        """
        Raise ConflictError if the username already exists.
        """
        existing = await self.users.find_one({"username": username}, {"_id": 1})
        if existing:
            raise ConflictError("Failed to add user. Username is already taken")

    async def get_user_by_id(self, user_id: str) -> User:
        """
        Get user by ID.

        Raises:
            NotFoundError: If no user has this ID
        """
        user_doc = await self.users.find_one({"_id": user_id}, PUBLIC_FIELDS)

        if not user_doc:
            raise NotFoundError("User not found")

        return User(**user_doc)

    async def verify_user_credential(self, username: str, password: str) -> str:
        """
        Check a username/password pair.

        Unknown usernames and wrong passwords fail identically.

        Returns:
            The matching user ID

        Raises:
            AuthenticationError: If the credentials are wrong
        """
        user_doc = await self.users.find_one(
            {"username": username}, {"_id": 1, "password": 1}
        )

        if not user_doc:
            await run_in_threadpool(verify_password, password, DUMMY_PASSWORD_HASH)
            raise AuthenticationError(INVALID_CREDENTIALS)

        if not await run_in_threadpool(verify_password, password, user_doc["password"]):
            raise AuthenticationError(INVALID_CREDENTIALS)

        return user_doc["_id"]

    async def get_users_by_username(self, username: str) -> list[User]:
        """Find users whose username contains the fragment (case-sensitive)."""
        cursor = self.users.find(
            {"username": {"$regex": re.escape(username)}},
            PUBLIC_FIELDS,
        )
        users = await cursor.to_list(length=None)
        return [User(**doc) for doc in users]
