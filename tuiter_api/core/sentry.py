import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration
from sentry_sdk.integrations.pymongo import PyMongoIntegration


def init_sentry(dsn: str, environment: str = "dev") -> bool:
    """Enable error reporting; returns False when no DSN is configured."""
    if not dsn:
        return False
    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        integrations=[
            # JSON logs already go to stdout; keep them out of Sentry
            LoggingIntegration(level=None, event_level=None),
            FastApiIntegration(),
            PyMongoIntegration(),
        ],
        traces_sample_rate=0.2,
        send_default_pii=False,
    )
    return True
