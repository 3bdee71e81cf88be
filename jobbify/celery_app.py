from celery import Celery, Task


class ContextTask(Task):
    """Runs every task inside the app context of the Flask app bound by init_celery()."""

    def __call__(self, *args, **kwargs):
        with self.app.flask_app.app_context():
            return super().__call__(*args, **kwargs)


celery_app = Celery(__name__, task_cls=ContextTask)


def init_celery(app):
    """
    Bind Celery to the current Flask app so tasks can use database/session.
    """
    celery_app.flask_app = app
    celery_app.conf.update(
        broker_url=app.config.get('CELERY_BROKER_URL'),
        result_backend=app.config.get('CELERY_RESULT_BACKEND'),
        task_always_eager=app.config.get('CELERY_TASK_ALWAYS_EAGER', False),
        task_serializer='json',
        result_serializer='json',
        accept_content=['json'],
        timezone='UTC',
    )
    return celery_app
