import os
import sys

# Make `app` importable when the server starts outside the project root
path = os.path.dirname(os.path.abspath(__file__))
if path not in sys.path:
    sys.path.append(path)

from app.main import app as application
from app.core.config import settings

# This 'application' object is what ASGI servers look for
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT)
