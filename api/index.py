import os

from cryo_webhooks import create_app
from cryo_webhooks.config.settings import VercelConfig

# Vercel busca la variable ``app`` en este módulo
app = create_app(VercelConfig)

if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    from waitress import serve
    serve(app, host='0.0.0.0', port=port)
