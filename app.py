"""Box Score Finder entry point."""
import uvicorn

from boxscorefinder.api.app import app
from boxscorefinder.config import PORT

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=PORT)
