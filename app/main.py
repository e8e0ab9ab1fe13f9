import uvicorn
from dotenv import load_dotenv

from infrastructure.services import get_settings
from server import server

server_app = server.handler

load_dotenv()


def main():
    """Main function to start the application."""
    settings = get_settings()
    uvicorn.run(
        server_app,
        host=settings.server.HOST,
        port=settings.server.PORT,
    )


if __name__ == "__main__":
    main()
