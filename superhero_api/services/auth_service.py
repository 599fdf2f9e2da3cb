"""
Authentication Service

Handles user registration, login and JWT bearer tokens. Tokens are
stateless: each one carries the ``{_id, email, username}`` identity of its
user and is verified by signature and expiry alone.
"""

import datetime
from typing import Any, Dict, Optional

import jwt

from ..exceptions import DuplicateUserError, UserNotFound, UserValidationError
from ..models import User
from .user_store import UserStore

JWT_ALGORITHM = "HS256"


class AuthService:
    """
    Authentication service for handling user registration, login, and token management.
    """
    
    def __init__(self, user_store: UserStore, jwt_secret: str, expiration_hours: int = 2):
        """
        Initialize the authentication service.
        
        Args:
            user_store: Store holding user accounts
            jwt_secret: Secret key for JWT token generation
            expiration_hours: Token lifetime
        """
        self.user_store = user_store
        self.jwt_secret = jwt_secret
        self.expiration_hours = expiration_hours
    
    def sign_token(self, user: User) -> str:
        """
        Create a signed bearer token for a user.
        
        Args:
            user: The authenticated user
            
        Returns:
            Encoded JWT string
        """
        token_payload = {
            "data": user.identity(),
            "exp": datetime.datetime.now(datetime.timezone.utc)
                   + datetime.timedelta(hours=self.expiration_hours)
        }
        return jwt.encode(token_payload, self.jwt_secret, algorithm=JWT_ALGORITHM)
    
    def register_user(self, email: str, username: str, password: str) -> Dict[str, Any]:
        """
        Register a new user and sign them in.
        
        Args:
            email: User's email address
            username: User's chosen username
            password: User's chosen password
            
        Returns:
            Dictionary with success status and token/user or error
        """
        try:
            user = self.user_store.create_user(email, username, password)
        except (UserValidationError, DuplicateUserError) as e:
            return {"success": False, "error": str(e)}
        
        return {
            "success": True,
            "message": "User registered successfully",
            "token": self.sign_token(user),
            "user": user.to_dict()
        }
    
    def login_user(self, username: str, password: str) -> Dict[str, Any]:
        """
        Authenticate a user and generate JWT token.
        
        Args:
            username: User's username
            password: User's password
            
        Returns:
            Dictionary with success status and JWT token or error
        """
        if not username or not password:
            return {"success": False, "error": "Username and password are required"}
        
        user = self.user_store.find_by_username(username)
        if not user or not self.user_store.verify_password(password, user.password_hash):
            return {"success": False, "error": "Invalid username or password"}
        
        return {
            "success": True,
            "token": self.sign_token(user),
            "user": user.to_dict()
        }
    
    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify a JWT token and load its user.
        
        Args:
            token: JWT token string
            
        Returns:
            Dictionary with success status and user data or error
        """
        if not token:
            return {"success": False, "error": "Token is required"}
        
        try:
            payload = jwt.decode(token, self.jwt_secret, algorithms=[JWT_ALGORITHM])
        except jwt.ExpiredSignatureError:
            return {"success": False, "error": "Token has expired"}
        except jwt.InvalidTokenError:
            return {"success": False, "error": "Invalid token"}
        
        identity = payload.get("data") or {}
        if not isinstance(identity, dict) or not identity.get("_id"):
            return {"success": False, "error": "Invalid token payload"}
        
        user = self.user_store.find_by_id(identity["_id"])
        if not user:
            return {"success": False, "error": "User not found"}
        
        return {"success": True, "user": user}
    
    def change_password(self, user_id: str, new_password: str) -> Dict[str, Any]:
        """
        Change a user's password. The hash is only rewritten on a real change.
        
        Returns:
            Dictionary with success status and whether the password changed
        """
        try:
            changed = self.user_store.change_password(user_id, new_password)
        except (UserValidationError, UserNotFound) as e:
            return {"success": False, "error": str(e)}
        
        return {
            "success": True,
            "changed": changed,
            "message": "Password updated" if changed else "Password unchanged"
        }


# Global service instance
_auth_service = None


def get_auth_service() -> Optional[AuthService]:
    """Get the global auth service instance."""
    return _auth_service


def initialize_auth_service(user_store: UserStore, jwt_secret: str, expiration_hours: int = 2) -> AuthService:
    """Initialize the global auth service instance."""
    global _auth_service
    _auth_service = AuthService(user_store, jwt_secret, expiration_hours)
    return _auth_service
