"""
Celery entry point for running worker commands.

Usage:
    celery -A celery_worker worker --loglevel=info --pool=solo
"""
from jobbify import create_app
from jobbify.celery_app import celery_app

# Binds broker settings and the Flask app context to every task
flask_app = create_app()

# IMPORTANT: Import tasks so the @celery_app.task decorators register them
from jobbify.tasks import staff_tasks  # noqa: F401,E402

print(f"[CELERY WORKER] Registered tasks: {sorted(name for name in celery_app.tasks if not name.startswith('celery.'))}")

if __name__ == '__main__':
    celery_app.start()
