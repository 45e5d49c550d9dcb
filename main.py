"""
Wordle Game Server - Main Entry Point

This is the main entry point for the Wordle game server.
It initializes the game service and starts the Flask-SocketIO application.
"""

from wordle_app import create_app
from wordle_app.config import Config, validate_word_list_integrity, get_word_statistics
from wordle_app.services.game_service import initialize_game_service
from wordle_app.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        validate_word_list_integrity()
        stats = get_word_statistics()
        print(f"✓ Word list validated ({stats['total_words']} answers)")

        game_service = initialize_game_service(Config)
        print(f"✓ Game service initialized (seed={Config.WORD_SEED}, default target={'set' if game_service.default_target else 'random'})")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordle Server Starting")

        print(f"\nStarting Wordle Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
