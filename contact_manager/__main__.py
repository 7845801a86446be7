from os import environ

from contact_manager.app import create_app
from contact_manager.log import configure_logging


def main() -> None:
    configure_logging()
    app = create_app()
    app.run(
        host=environ.get("HOST", "0.0.0.0"),
        port=int(environ.get("PORT", 5000)),
        threaded=True,
    )


if __name__ == "__main__":
    main()
