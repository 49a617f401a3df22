"""
Flask app for the PocketCalc web calculator
Serves the calculator page and accepts key presses as JSON
"""
import threading

from flask import Flask, jsonify, request, send_from_directory
from flask_cors import CORS

import config
from calculator import CalculatorEngine
from database import Database
from effects import SaveSession, describe
from keymap import event_for_button, event_for_key
from logging_config import get_logger
from session_manager import SessionManager, to_snapshot

logger = get_logger(__name__)


def _state_payload(session):
    """Snapshot plus an error flag for the page"""
    payload = to_snapshot(session)
    payload['isError'] = session.is_error
    return payload


def create_app(session_manager=None):
    """Build the web app around one calculator session"""
    if session_manager is None:
        session_manager = SessionManager(Database())

    app = Flask(__name__, static_folder=config.WEB_DIR, static_url_path='')
    CORS(app)  # Enable CORS for all routes

    engine = CalculatorEngine(session_manager.load())
    lock = threading.Lock()

    def _submit(event):
        # Snapshots are written under the lock, in event order
        with lock:
            session = engine.submit(event)
            effects = list(engine.last_effects)
            for effect in effects:
                if isinstance(effect, SaveSession):
                    session_manager.save(effect.session)
        described = [d for d in (describe(e) for e in effects) if d is not None]
        return session, described

    @app.route('/')
    def index():
        """Serve the calculator page"""
        return send_from_directory(config.WEB_DIR, 'index.html')

    @app.route('/api/state')
    def get_state():
        """Current calculator state"""
        with lock:
            session = engine.current_state()
        return jsonify({'success': True, 'state': _state_payload(session), 'effects': []})

    @app.route('/api/events', methods=['POST'])
    def post_event():
        """Apply one button or key press.

        Body: {"button": "7"} or {"key": "Enter"} / {"key": "+"}
        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not ('button' in data or 'key' in data):
            return jsonify({'success': False, 'error': 'Expected {"button": ...} or {"key": ...}'}), 400

        if 'button' in data:
            event = event_for_button(data['button'])
        else:
            key = data['key'] if isinstance(data['key'], str) else ''
            event = event_for_key(key, key)

        if event is None:
            logger.debug(f"Ignoring unknown input: {data}")
        try:
            session, effects = _submit(event)
        except Exception as e:
            logger.exception("Failed to apply event")
            return jsonify({'success': False, 'error': str(e)}), 500
        return jsonify({'success': True, 'state': _state_payload(session), 'effects': effects})

    @app.route('/api/reset', methods=['POST'])
    def reset():
        """Forget the saved session and start over"""
        with lock:
            session = engine.reset()
            session_manager.reset()
        return jsonify({'success': True, 'state': _state_payload(session), 'effects': []})

    return app


if __name__ == '__main__':
    from logging_config import setup_logging

    setup_logging(log_file=config.LOG_FILE)
    print("\n" + "="*60)
    print(f"{config.APP_NAME} Web Calculator")
    print("="*60)
    print(f"Server starting on http://{config.WEB_HOST}:{config.WEB_PORT}")
    print("="*60 + "\n")

    create_app().run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False)
