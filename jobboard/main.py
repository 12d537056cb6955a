"""
ASGI entrypoint: ``uvicorn jobboard.main:app`` or ``python -m jobboard.main``.
"""

import uvicorn

from .app import create_app

app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)
