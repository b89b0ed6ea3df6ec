"""
Wordle Board Server - Main Entry Point

Loads the word list, initializes the game service and starts the
Flask-SocketIO application.
"""

from wordle_board import create_app
from wordle_board.config import get_config
from wordle_board.services.dictionary import WordDictionary
from wordle_board.services.game_service import initialize_game_service
from wordle_board.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = get_config()

    try:
        print("Initializing services...")

        dictionary = WordDictionary.from_json(config_class.WORD_LIST_PATH, config_class.WORD_SIZE)
        initialize_game_service(
            dictionary,
            word_size=config_class.WORD_SIZE,
            max_guesses=config_class.MAX_GUESSES_COUNT,
        )
        print(f"✓ Game service initialized successfully ({len(dictionary)} words)")

        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordle Board Server Starting")

        print(f"\nStarting Wordle Board Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Config: {config_class.__name__}, debug mode: {config_class.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Board Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
