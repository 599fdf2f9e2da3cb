"""
Superhero Game Server Application Package

Flask implementation of the Higher/Lower superhero stats game API and the
hero-draft stats endpoints.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.
    
    Services must already be initialized (see
    ``services.database.initialize_services``); the blueprints look them up
    through their ``get_*`` accessors on every request.
    
    Args:
        config_class: Configuration class to use
        
    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    
    # Initialize extensions
    CORS(app)
    
    # Register blueprints
    from .controllers.auth_controller import auth_bp
    from .controllers.catalog_controller import catalog_bp
    from .controllers.game_controller import game_bp
    
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(catalog_bp, url_prefix='/api')
    app.register_blueprint(game_bp, url_prefix='/api')
    
    return app
