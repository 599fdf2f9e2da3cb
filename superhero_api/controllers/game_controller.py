"""
Game Controller

Handles the Higher/Lower session flow and draft result endpoints.
"""

from flask import Blueprint, request, jsonify
from ..exceptions import SuperheroApiError
from ..services.game_service import get_game_service
from ..utils.decorators import require_auth
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _failure(action: str, e: Exception, status_code: int):
    game_logger.log_error(request, e, action)
    error_response = {
        'success': False,
        'error': str(e)
    }
    game_logger.log_server_response(request, action, False, error_response)
    return jsonify(error_response), status_code


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


@game_bp.route('/higher-lower/start', methods=['POST'])
@require_auth
def start_session():
    """Start a Higher/Lower session with a difficulty-balanced hero pair."""
    action = 'startHigherLowerSession'
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()
        
        data = request.get_json(silent=True) or {}
        attribute = data.get('attribute')
        
        game_logger.log_user_action(request, action, attribute=attribute)
        
        session = game_service.start_session(attribute, request.user)
        
        response_data = {
            'success': True,
            **session.to_dict()
        }
        game_logger.log_game_event(
            'session_started', request.user.username,
            attribute=attribute,
            difficulty=session.matchup.difficulty,
            diff=session.matchup.diff,
            hero_a=session.matchup.hero_a.id,
            hero_b=session.matchup.hero_b.id
        )
        game_logger.log_server_response(request, action, True, response_data)
        return jsonify(response_data)
        
    except SuperheroApiError as e:
        return _failure(action, e, e.status_code)
    except Exception as e:
        return _failure(action, e, 500)


@game_bp.route('/higher-lower/guess', methods=['POST'])
@require_auth
def validate_guess():
    """Validate a Higher/Lower guess for hero A against hero B."""
    action = 'validateHigherLowerGuess'
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()
        
        data = request.get_json(silent=True) or {}
        guess = data.get('guess')
        attribute = data.get('attribute')
        hero_a_id = data.get('heroAId')
        hero_b_id = data.get('heroBId')
        
        game_logger.log_user_action(
            request, action,
            guess=guess, attribute=attribute, hero_a=hero_a_id, hero_b=hero_b_id
        )
        
        result = game_service.validate_guess(guess, attribute, hero_a_id, hero_b_id)
        
        response_data = {
            'success': True,
            **result.to_dict()
        }
        game_logger.log_game_event(
            'guess_validated', request.user.username,
            attribute=attribute, guess=guess, is_correct=result.is_correct
        )
        game_logger.log_server_response(request, action, True, response_data)
        return jsonify(response_data)
        
    except SuperheroApiError as e:
        return _failure(action, e, e.status_code)
    except Exception as e:
        return _failure(action, e, 500)


@game_bp.route('/higher-lower/end', methods=['POST'])
@require_auth
def end_session():
    """Persist the final score of a Higher/Lower session."""
    action = 'endHigherLowerSession'
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()
        
        data = request.get_json(silent=True) or {}
        final_score = data.get('finalScore')
        
        game_logger.log_user_action(request, action, final_score=final_score)
        
        result = game_service.end_session(request.user.id, final_score)
        
        response_data = {
            'success': True,
            **result.to_dict()
        }
        game_logger.log_game_event(
            'session_ended', request.user.username,
            final_score=final_score,
            highest_score=result.higher_lower_game_highest_score,
            games_played=result.higher_lower_games_played
        )
        game_logger.log_server_response(request, action, True, response_data)
        return jsonify(response_data)
        
    except SuperheroApiError as e:
        return _failure(action, e, e.status_code)
    except Exception as e:
        return _failure(action, e, 500)


@game_bp.route('/higher-lower/highest-score', methods=['POST'])
@require_auth
def update_highest_score():
    """Record a played game and raise the stored best streak if beaten."""
    action = 'updateHigherLowerHighestScore'
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()
        
        data = request.get_json(silent=True) or {}
        streak = data.get('streak')
        
        game_logger.log_user_action(request, action, streak=streak)
        
        user = game_service.update_highest_score(request.user.id, streak)
        
        response_data = {
            'success': True,
            'user': user.to_dict()
        }
        game_logger.log_server_response(request, action, True, response_data)
        return jsonify(response_data)
        
    except SuperheroApiError as e:
        return _failure(action, e, e.status_code)
    except Exception as e:
        return _failure(action, e, 500)


@game_bp.route('/draft/result', methods=['POST'])
@require_auth
def record_draft_result():
    """Record the outcome of a draft game."""
    action = 'updateDraftGameStats'
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()
        
        data = request.get_json(silent=True) or {}
        won = data.get('won')
        
        game_logger.log_user_action(request, action, won=won)
        
        user = game_service.record_draft_result(request.user.id, won)
        
        response_data = {
            'success': True,
            'user': user.to_dict()
        }
        game_logger.log_game_event(
            'draft_recorded', request.user.username,
            won=won, draft_games_played=user.draft_games_played
        )
        game_logger.log_server_response(request, action, True, response_data)
        return jsonify(response_data)
        
    except SuperheroApiError as e:
        return _failure(action, e, e.status_code)
    except Exception as e:
        return _failure(action, e, 500)
