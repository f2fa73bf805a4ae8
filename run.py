# /run.py
import os

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from hms import create_app

# Create the app instance; exits if the database is unreachable
app = create_app()


if __name__ == '__main__':
    port = app.config['PORT']
    print(f"Server listening on port {port}")
    app.run(host=os.environ.get('HOST', '127.0.0.1'), port=port, debug=app.debug)
