"""
PocketCalc
Desktop application entry point
"""
import logging
import tkinter as tk

import config
from database import Database
from gui import PocketCalcGUI
from logging_config import get_logger, setup_logging
from session_manager import SessionManager

logger = get_logger(__name__)


def main():
    setup_logging(logging.INFO, config.LOG_FILE)
    logger.info(f"Starting {config.APP_NAME} {config.VERSION}")

    session_manager = SessionManager(Database())

    # Start the GUI
    root = tk.Tk()
    PocketCalcGUI(root, session_manager)
    root.mainloop()

    logger.info("Window closed")


if __name__ == "__main__":
    main()
