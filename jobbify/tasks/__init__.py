"""
Celery tasks package.

Import directly from modules when needed:
  from jobbify.tasks.staff_tasks import send_staff_invitation_task
"""
