import logging

import uvicorn
from mealboard.api.api_run import app
from mealboard.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL
from mealboard.utilities.network import server_urls


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    urls = server_urls(APP_PORT)
    print(f"Meal board running on {urls['local']} (Press CTRL+C to quit)")
    if urls["lan"]:
        print(f"Open on other devices in this network: {urls['lan']}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
