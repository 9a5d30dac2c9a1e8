"""Celery application used as a message producer.

This service only publishes: the notifier service owns the workers that
consume ``email-notification.*`` tasks. No result backend is configured.
"""

from celery import Celery

from snapix.config.settings import Settings

NOTIFIER_QUEUE = "notifier"


def create_celery_app(settings: Settings) -> Celery:
    """Build the producer app.

    ``RMQ_URLS`` may list several brokers; Celery treats a list as failover
    candidates tried in order.
    """
    app = Celery("snapix", broker=settings.rmq_url_list or None)

    app.conf.update(
        # ==================== Task Settings ====================
        task_serializer="json",
        accept_content=["json"],
        timezone="UTC",
        enable_utc=True,
        task_ignore_result=True,
        task_default_queue=NOTIFIER_QUEUE,
        # ==================== Publish Settings ====================
        # Bounds how long send_task blocks while the broker is unreachable
        task_publish_retry=True,
        task_publish_retry_policy={
            "max_retries": 3,
            "interval_start": 0,
            "interval_step": 0.5,
            "interval_max": 2,
        },
    )
    return app
