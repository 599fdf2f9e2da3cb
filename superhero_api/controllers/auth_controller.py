"""
Authentication Controller

Handles all authentication-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..services.auth_service import get_auth_service
from ..utils.decorators import optional_auth, require_auth
from ..utils.game_logger import game_logger

auth_bp = Blueprint('auth', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Authentication service unavailable'
    }), 500


def _server_error(action: str, e: Exception):
    game_logger.log_error(request, e, action)
    error_response = {
        'success': False,
        'error': str(e)
    }
    game_logger.log_server_response(request, action, False, error_response)
    return jsonify(error_response), 500


@auth_bp.route('/register', methods=['POST'])
def register():
    """Register a new user (addUser) and return a JWT token."""
    try:
        auth_service = get_auth_service()
        if not auth_service:
            return _service_unavailable()
        
        data = request.get_json(silent=True)
        if not data:
            return jsonify({
                'success': False,
                'error': 'Request body is required'
            }), 400
        
        email = data.get('email')
        username = data.get('username')
        password = data.get('password')
        
        game_logger.log_user_action(request, 'addUser', username=username, email=email)
        
        result = auth_service.register_user(email, username, password)
        
        game_logger.log_server_response(request, 'addUser', result['success'], result)
        if result['success']:
            return jsonify(result), 201
        return jsonify(result), 400
            
    except Exception as e:
        return _server_error('addUser', e)


@auth_bp.route('/login', methods=['POST'])
def login():
    """Login a user and return JWT token."""
    try:
        auth_service = get_auth_service()
        if not auth_service:
            return _service_unavailable()
        
        data = request.get_json(silent=True)
        if not data:
            return jsonify({
                'success': False,
                'error': 'Request body is required'
            }), 400
        
        username = data.get('username')
        password = data.get('password')
        
        game_logger.log_user_action(request, 'login', username=username)
        
        result = auth_service.login_user(username, password)
        
        game_logger.log_server_response(request, 'login', result['success'], result)
        if result['success']:
            return jsonify(result)
        return jsonify(result), 401
            
    except Exception as e:
        return _server_error('login', e)


@auth_bp.route('/me', methods=['GET'])
@optional_auth
def me():
    """Return the caller's profile, or a null user when unauthenticated."""
    try:
        user = request.user
        response_data = {
            'success': True,
            'user': user.to_dict() if user else None
        }
        game_logger.log_server_response(request, 'me', True, response_data)
        return jsonify(response_data)
        
    except Exception as e:
        return _server_error('me', e)


@auth_bp.route('/profile', methods=['GET'])
@require_auth
def get_profile():
    """Get the authenticated user's profile."""
    try:
        response_data = {
            'success': True,
            'user': request.user.to_dict()
        }
        game_logger.log_server_response(request, 'user', True, response_data)
        return jsonify(response_data)
        
    except Exception as e:
        return _server_error('user', e)


@auth_bp.route('/password', methods=['PUT'])
@require_auth
def change_password():
    """Change the authenticated user's password."""
    try:
        auth_service = get_auth_service()
        data = request.get_json(silent=True) or {}
        
        game_logger.log_user_action(request, 'changePassword')
        
        result = auth_service.change_password(request.user.id, data.get('password'))
        
        game_logger.log_server_response(request, 'changePassword', result['success'], result)
        if result['success']:
            return jsonify(result)
        return jsonify(result), 400
        
    except Exception as e:
        return _server_error('changePassword', e)
