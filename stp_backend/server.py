#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e ".[test]"
#setup: flask --app stp_backend.server run --port 5000 --debug

from stp_backend.app import create_app
from stp_backend.config import settings
from stp_backend.observability import setup_logging

setup_logging(settings.log_level, settings.service_name)

app = create_app(settings)


if __name__ == "__main__":
    app.run(port=5000, debug=True)
