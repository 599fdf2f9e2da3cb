"""
Authentication Decorators

Contains decorators for HTTP authentication.
"""

from functools import wraps
from typing import Optional

from flask import request, jsonify


def bearer_token(request_obj=None) -> Optional[str]:
    """
    Read the token from the Authorization header.

    Accepts ``Bearer <token>`` as well as a bare token.
    """
    if request_obj is None:
        request_obj = request
    auth_header = request_obj.headers.get('Authorization', '')
    if auth_header.startswith('Bearer '):
        auth_header = auth_header[len('Bearer '):]
    return auth_header.strip() or None


def require_auth(f):
    """
    Decorator to require authentication for protected HTTP endpoints.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.auth_service import get_auth_service
        
        auth_service = get_auth_service()
        if not auth_service:
            return jsonify({
                'success': False,
                'error': 'Authentication service unavailable'
            }), 500
        
        token = bearer_token()
        if not token:
            return jsonify({
                'success': False,
                'error': 'Authorization token required'
            }), 401
        
        result = auth_service.verify_token(token)
        if not result['success']:
            return jsonify({
                'success': False,
                'error': result['error']
            }), 401
        
        # Add user to request context
        request.user = result['user']
        return f(*args, **kwargs)
    
    return decorated_function


def optional_auth(f):
    """
    Decorator that attaches the caller when a valid token is present and
    leaves ``request.user`` as None otherwise.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.auth_service import get_auth_service
        
        request.user = None
        auth_service = get_auth_service()
        token = bearer_token()
        if auth_service and token:
            result = auth_service.verify_token(token)
            if result['success']:
                request.user = result['user']
        return f(*args, **kwargs)
    
    return decorated_function
