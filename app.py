"""
LifeLink Blood Donor Registry
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the lifelink package.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

from lifelink import create_app  # noqa: E402

logging.basicConfig(
    level=os.environ.get('LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)

# Create the Flask application using the factory
app = create_app()

if __name__ == '__main__':
    app.run(debug=not app.config['PRODUCTION'], host='0.0.0.0', port=int(os.environ.get('PORT', 3000)))
