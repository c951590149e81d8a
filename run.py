# run.py
import os

from waitress import serve

from cryo_webhooks import create_app
from cryo_webhooks.config.settings import ProductionConfig

app = create_app(ProductionConfig)

if __name__ == '__main__':
    port = int(os.environ.get('PORT', 8080))
    serve(app, host='0.0.0.0', port=port)
