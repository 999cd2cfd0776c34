import uvicorn

from webapi.api import create_app
from webapi.config.settings import get_settings


def run() -> None:
    settings = get_settings()
    app = create_app(settings)
    # Logging is already configured by create_app(); keep uvicorn from replacing it
    uvicorn.run(app, host=settings.SERVER_HOST, port=settings.SERVER_PORT, log_config=None)


if __name__ == "__main__":
    run()
