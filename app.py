"""
Appwrite Todo Demo
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the appwrite_demo package.
Set APP_ENV=production to select ProductionConfig.
"""

import os

from appwrite_demo import create_app
from appwrite_demo.config import Config, ProductionConfig

# Create the Flask application using the factory
app = create_app(ProductionConfig if os.environ.get('APP_ENV') == 'production' else Config)

if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5000)
