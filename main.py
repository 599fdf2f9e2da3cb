"""
Superhero Game Server - Main Entry Point

This is the main entry point for the superhero game server.
It connects to MongoDB, initializes all services and starts the Flask application.
"""

from superhero_api import create_app
from superhero_api.config import Config
from superhero_api.services import connect_database, initialize_services, load_hero_seed
from superhero_api.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")
        
        db = connect_database(Config.MONGO_URI, Config.MONGO_DB_NAME)
        print("✓ Connected to MongoDB")
        
        hero_store, _, _, _ = initialize_services(db, Config)
        print("✓ Services initialized successfully")
        
        # Seed the catalog on first start
        if hero_store.count() == 0:
            inserted = hero_store.seed(load_hero_seed(Config.HERO_SEED_FILE))
            print(f"✓ Seeded {inserted} heroes from {Config.HERO_SEED_FILE}")
        
        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")
        
        game_logger.logger.info("Superhero Game Server starting")
        
        print(f"\nStarting Superhero Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)
        
        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)
        
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Superhero Game Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
