"""User accounts: registration and credential checks."""

from datetime import datetime, timezone
from typing import Any, Dict

from pymongo.errors import DuplicateKeyError

from schemas.enums import Role
from services.auth_service import create_access_token, get_password_hash, verify_password
from services.errors import ConflictError, UnauthorizedError
from utils.logger import setup_logger

logger = setup_logger(__name__)


class UserService:
    """Register users and exchange credentials for access tokens."""

    def __init__(self, users_collection):
        self.users = users_collection

    async def register(self, email: str, password: str) -> Dict[str, Any]:
        """Create a user with a hashed password; the email must be unused."""
        if await self.users.find_one({"email": email}):
            raise ConflictError("Email already registered")

        now = datetime.now(timezone.utc)
        document = {
            "email": email,
            "passwordHash": get_password_hash(password),
            "role": Role.USER.value,
            "createdAt": now,
            "updatedAt": now,
        }
        try:
            result = await self.users.insert_one(document)
        except DuplicateKeyError:
            raise ConflictError("Email already registered")

        logger.info(f"Registered user {result.inserted_id}")
        return {"id": str(result.inserted_id), "email": email, "role": document["role"]}

    async def authenticate(self, email: str, password: str) -> Dict[str, Any]:
        """Return the user for valid credentials, UnauthorizedError otherwise."""
        user = await self.users.find_one({"email": email})
        if not user or not user.get("passwordHash") or not verify_password(password, user["passwordHash"]):
            logger.warning(f"Failed login attempt for {email}")
            raise UnauthorizedError("Invalid credentials")
        return user

    async def login(self, email: str, password: str) -> Dict[str, str]:
        user = await self.authenticate(email, password)
        logger.info(f"User {user['_id']} logged in")
        return {"access_token": create_access_token(user), "token_type": "bearer"}
