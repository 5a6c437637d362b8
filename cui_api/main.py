import uvicorn
import logging

from cui_api.app import app
from cui_api.core.config import Config


def run() -> None:
    Config.validate()

    # Configure logging
    logging.basicConfig(
        level=Config.log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
        ]
    )
    logging.getLogger(__name__).info(f"Starting {Config.API_NAME} on {Config.HOST}:{Config.port()}")
    uvicorn.run(app, host=Config.HOST, port=Config.port())


if __name__ == "__main__":
    run()
