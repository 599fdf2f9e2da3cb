"""
Catalog Controller

Read-only endpoints for the hero catalog and user listings, plus the
health check.
"""

from flask import Blueprint, request, jsonify
from ..services.auth_service import get_auth_service
from ..services.hero_store import get_hero_store
from ..services.user_store import get_user_store
from ..utils.game_logger import game_logger

catalog_bp = Blueprint('catalog', __name__)


def _server_error(action: str, e: Exception):
    game_logger.log_error(request, e, action)
    error_response = {
        'success': False,
        'error': str(e)
    }
    game_logger.log_server_response(request, action, False, error_response)
    return jsonify(error_response), 500


@catalog_bp.route('/heroes', methods=['GET'])
def list_heroes():
    """List the whole hero catalog."""
    try:
        hero_store = get_hero_store()
        if not hero_store:
            return jsonify({
                'success': False,
                'error': 'Hero catalog unavailable'
            }), 500
        
        response_data = {
            'success': True,
            'heroes': [hero.to_dict() for hero in hero_store.list_all()]
        }
        game_logger.log_server_response(request, 'heroes', True, response_data)
        return jsonify(response_data)
        
    except Exception as e:
        return _server_error('heroes', e)


@catalog_bp.route('/heroes/<hero_id>', methods=['GET'])
def get_hero(hero_id):
    """Look up one hero by its external id."""
    try:
        hero_store = get_hero_store()
        if not hero_store:
            return jsonify({
                'success': False,
                'error': 'Hero catalog unavailable'
            }), 500
        
        hero = hero_store.find_by_id(hero_id)
        if hero is None:
            error_response = {
                'success': False,
                'hero': None,
                'error': 'Hero not found'
            }
            game_logger.log_server_response(request, 'hero', False, error_response, hero_id=hero_id)
            return jsonify(error_response), 404
        
        response_data = {
            'success': True,
            'hero': hero.to_dict()
        }
        game_logger.log_server_response(request, 'hero', True, response_data, hero_id=hero_id)
        return jsonify(response_data)
        
    except Exception as e:
        return _server_error('hero', e)


@catalog_bp.route('/users', methods=['GET'])
def list_users():
    """List all users without their password hashes."""
    try:
        user_store = get_user_store()
        if not user_store:
            return jsonify({
                'success': False,
                'error': 'User store unavailable'
            }), 500
        
        response_data = {
            'success': True,
            'users': [user.to_dict() for user in user_store.list_users()]
        }
        game_logger.log_server_response(request, 'users', True, response_data)
        return jsonify(response_data)
        
    except Exception as e:
        return _server_error('users', e)


@catalog_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        hero_store = get_hero_store()
        response_data = {
            'status': 'healthy',
            'success': True,
            'hero_count': hero_store.count() if hero_store else 0,
            'auth_available': get_auth_service() is not None,
            'log_stats': game_logger.get_log_stats()
        }
        return jsonify(response_data)
        
    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        return jsonify({
            'status': 'error',
            'success': False,
            'error': str(e)
        }), 500
