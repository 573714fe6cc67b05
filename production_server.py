import os
import sys

# Ensure current directory is in path before importing the app
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from waitress import serve
from main import app, HOST

THREADS = int(os.environ.get("WAITRESS_THREADS", 6))

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    print(f"Hedge Stake Calculator listening on http://{HOST}:{port} ({THREADS} threads)")
    serve(app, host=HOST, port=port, threads=THREADS)
