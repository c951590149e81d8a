from cryo_webhooks.factory import create_app

__all__ = ['create_app']
