"""
PocketCalc Web Launcher
Simple script to start the web calculator
"""
import sys

import config
from logging_config import setup_logging

print(f"Starting {config.APP_NAME} web calculator...")
print()

try:
    from api import create_app
except ImportError as e:
    print(f"Error importing modules: {e}")
    print("\nMake sure you have installed the required dependencies:")
    print("  pip install -e .")
    sys.exit(1)

setup_logging(log_file=config.LOG_FILE)
print(f"Open http://localhost:{config.WEB_PORT} in your browser")

try:
    create_app().run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False)
except OSError as e:
    print(f"Error starting server: {e}")
    print("\nTroubleshooting:")
    print("1. Check if another application is using the port")
    print(f"2. Change WEB_PORT in config.py (currently {config.WEB_PORT})")
    sys.exit(1)
