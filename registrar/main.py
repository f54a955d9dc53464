"""
Main entry point for the Registrar platform.
"""

import json
import logging
import threading
import time
from typing import Any, Dict, Optional

from .core.entities import Course
from .core.enums import Faculty, StudentStatus, CourseType, Semester
from .services import AcademicRecordsEngine
from .api.rest_api import RegistrarRestAPI
from .walkthrough import run_walkthrough


DEFAULT_CONFIG: Dict[str, Any] = {
    'log_level': 'INFO',
    'rest_host': '0.0.0.0',
    'rest_port': 8000,
    'seed_demo_data': False,
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Merge a JSON config file over the defaults. Unknown keys are ignored."""
    config = dict(DEFAULT_CONFIG)
    if path:
        with open(path, 'r', encoding='utf-8') as f:
            overrides = json.load(f)
        if not isinstance(overrides, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")
        config.update({k: v for k, v in overrides.items() if k in DEFAULT_CONFIG})
    return config


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging once with a single stream handler."""
    root = logging.getLogger()
    if not any(h.get_name() == "registrar" for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name("registrar")
        root.addHandler(handler)
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))


class RegistrarPlatform:
    """Wires the records engine to its REST API."""

    def __init__(self, config: Optional[dict] = None):
        self._config = dict(DEFAULT_CONFIG)
        self._config.update(config or {})
        self._engine = None
        self._rest_api = None
        self._rest_thread = None
        self._running = False

        self._initialize_platform()

    @property
    def engine(self) -> AcademicRecordsEngine:
        return self._engine

    @property
    def rest_api(self) -> RegistrarRestAPI:
        return self._rest_api

    def _initialize_platform(self):
        """Initialize the engine and API."""
        setup_logging(self._config['log_level'])
        print("Initializing Registrar platform...")

        self._engine = AcademicRecordsEngine()
        print("✓ Records engine initialized")

        self._rest_api = RegistrarRestAPI(self._engine)
        print("✓ REST API initialized")

        if self._config.get('seed_demo_data'):
            self.create_sample_data()

    def start_rest_server(self, host: Optional[str] = None, port: Optional[int] = None):
        """Start the REST server in a background thread."""
        if self._rest_thread and self._rest_thread.is_alive():
            print("REST server already running")
            return

        import uvicorn

        host = host or self._config['rest_host']
        port = port or self._config['rest_port']

        def run_server():
            uvicorn.run(
                self._rest_api.app,
                host=host,
                port=port,
                log_level=str(self._config['log_level']).lower()
            )

        self._rest_thread = threading.Thread(target=run_server, daemon=True)
        self._rest_thread.start()
        self._running = True

        print(f"✓ REST server started on {host}:{port}")
        print(f"  - API Docs: http://localhost:{port}/docs")

    def stop_platform(self):
        """Stop the platform. The server thread is a daemon and exits with the process."""
        if not self._running:
            return
        self._running = False
        print("✓ Registrar platform stopped")

    def create_sample_data(self):
        """Create a small catalog and a few students."""
        print("Creating sample data...")

        courses = [
            Course(1, "Programming Fundamentals", CourseType.MANDATORY, 5,
                   Semester.FIRST, Faculty.COMPUTER_SCIENCE, 2),
            Course(2, "Economic Analysis", CourseType.MANDATORY, 4,
                   Semester.FOURTH, Faculty.ECONOMICS, 2),
        ]
        for course in courses:
            self._engine.add_course(course)

        self._engine.enroll_student("Oleh Syniy", Faculty.COMPUTER_SCIENCE, 1,
                                    StudentStatus.ACTIVE, "CS101")
        self._engine.enroll_student("Anna Zhovta", Faculty.ECONOMICS, 4,
                                    StudentStatus.ACTIVE, "E102")
        self._engine.enroll_student("Stepan Zeleniy", Faculty.COMPUTER_SCIENCE, 1,
                                    StudentStatus.ACTIVE, "CS103")

        print("✓ Sample data created")

    def run_demo(self):
        """Run the demonstration walkthrough.

        Uses a scratch engine so the platform's own records are untouched
        and the demo can be repeated.
        """
        print("Running Registrar demonstration...")
        run_walkthrough(AcademicRecordsEngine())
        print("\n✓ Demo completed")


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Registrar Academic Records Platform")
    parser.add_argument("--host", type=str, default=None, help="REST server host")
    parser.add_argument("--rest-port", type=int, default=None, help="REST server port")
    parser.add_argument("--demo", action="store_true", help="Run demo mode")
    parser.add_argument("--config", type=str, help="Configuration file path")

    args = parser.parse_args()

    config = load_config(args.config)
    platform = RegistrarPlatform(config)

    try:
        if args.demo:
            platform.run_demo()
        else:
            platform.start_rest_server(args.host, args.rest_port)

            print("\nPlatform is running. Press Ctrl+C to stop.")
            while True:
                time.sleep(1)

    except KeyboardInterrupt:
        print("\nShutting down...")
        platform.stop_platform()


if __name__ == "__main__":
    main()
