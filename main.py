import logging
from dotenv import load_dotenv

load_dotenv(override=True)

from docproxy.config import load_config
from docproxy.demo import run_demo

def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    config = load_config()
    run_demo(config)

if __name__ == "__main__":
    main()
