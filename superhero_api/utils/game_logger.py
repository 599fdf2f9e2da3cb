"""
Game Logger Module for the Superhero Game Server

This module provides structured logging for user actions, server responses,
and game events.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config import Config

SENSITIVE_FIELDS = ('token', 'password')


class GameLogger:
    """
    Centralized logging system for the game server.
    
    Features:
    - User action tracking with IP/user identification
    - Server response logging with tokens and password hashes scrubbed
    - Game event logging
    - JSON structured logs for easy parsing
    """
    
    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = getattr(logging, level.upper(), logging.INFO)
        
        # Setup main game logger
        self.logger = self._setup_logger()
        
    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        logger = logging.getLogger('superhero_game')
        logger.setLevel(self.level)
        
        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()
        
        # Create log file with date
        log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"
        
        # File handler for detailed logs
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(self.level)
        
        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        
        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_formatter = logging.Formatter(
            '%(levelname)s: %(message)s'
        )
        
        file_handler.setFormatter(file_formatter)
        console_handler.setFormatter(console_formatter)
        
        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        
        return logger
    
    def _get_user_identity(self, request) -> Dict[str, Optional[str]]:
        """Extract user identity information from request."""
        user = getattr(request, 'user', None)
        return {
            'user_ip': getattr(request, 'remote_addr', None) or 'unknown',
            'user_id': getattr(user, 'id', None),
            'username': getattr(user, 'username', None)
        }
    
    def _create_log_entry(self, 
                         event_type: str, 
                         action: str, 
                         user_info: Dict[str, Optional[str]],
                         details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)
    
    def log_user_action(self, request, action: str, **kwargs):
        """
        Log user actions with full context.
        
        Args:
            request: Flask request object
            action: Operation name (e.g., 'addUser', 'startHigherLowerSession')
            **kwargs: Additional details to log
        """
        user_info = self._get_user_identity(request)
        
        details = {
            'endpoint': request.endpoint,
            'method': request.method,
            'url': request.url,
            **kwargs
        }
        
        log_message = self._create_log_entry('USER_ACTION', action, user_info, details)
        self.logger.info(log_message)
    
    def log_server_response(self, 
                           request, 
                           action: str,
                           success: bool,
                           response_data: Dict[str, Any],
                           **kwargs):
        """
        Log server responses with full context.
        
        Args:
            request: Flask request object
            action: Operation that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            **kwargs: Additional details to log
        """
        user_info = self._get_user_identity(request)
        
        details = {
            'success': success,
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }
        
        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, user_info, details)
        
        if success:
            self.logger.info(log_message)
        else:
            self.logger.error(log_message)
    
    def log_game_event(self, event: str, username: Optional[str], **kwargs):
        """
        Log game-specific events (session start/end, guesses, draft results).
        
        Args:
            event: Type of game event (e.g., 'session_started', 'session_ended')
            username: Player the event belongs to
            **kwargs: Additional game details
        """
        user_info = {'user_ip': None, 'user_id': None, 'username': username}
        log_message = self._create_log_entry('GAME_EVENT', event, user_info, dict(kwargs))
        self.logger.info(log_message)
    
    def log_error(self, request, error: Exception, action: str):
        """
        Log errors with full context.
        
        Args:
            request: Flask request object
            error: Exception that occurred
            action: Operation that was being performed
        """
        user_info = self._get_user_identity(request)
        
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        
        log_message = self._create_log_entry('ERROR', action, user_info, details)
        self.logger.error(log_message)
    
    def _sanitize_response_data(self, data: Any) -> Any:
        """Mask tokens and passwords and summarize hero payloads."""
        if isinstance(data, list):
            return {'items': len(data)}
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}
        
        sanitized = {}
        for key, value in data.items():
            if key in SENSITIVE_FIELDS:
                sanitized[key] = '***'
            elif key in ('heroA', 'heroB', 'hero') and isinstance(value, dict):
                sanitized[key] = {'id': value.get('id'), 'name': value.get('name')}
            elif key in ('heroes', 'users') and isinstance(value, list):
                sanitized[key] = {'count': len(value)}
            elif isinstance(value, dict):
                sanitized[key] = self._sanitize_response_data(value)
            else:
                sanitized[key] = value
        return sanitized
    
    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about logged events (useful for monitoring)."""
        log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"
        if not log_file.exists():
            return {'error': 'No log file found for today'}
        
        stats = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
            'user_actions': 0,
            'server_responses': 0,
            'game_events': 0,
            'errors': 0
        }
        
        with open(log_file, 'r', encoding='utf-8') as f:
            for line in f:
                if line.strip():
                    stats['total_entries'] += 1
                    if 'USER_ACTION' in line:
                        stats['user_actions'] += 1
                    elif 'SERVER_RESPONSE' in line:
                        stats['server_responses'] += 1
                    elif 'GAME_EVENT' in line:
                        stats['game_events'] += 1
                    elif 'ERROR' in line:
                        stats['errors'] += 1
        
        return stats


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
