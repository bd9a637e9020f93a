from django.core.management.base import BaseCommand

from workboard.constants.messages import AppMessages
from workboard.services.task_service import TaskService


class Command(BaseCommand):
    help = "Move open tasks whose due date has passed to the 'Incomplete - Overdue' status."

    def handle(self, *args, **options):
        marked_ids = TaskService.mark_overdue_tasks()
        self.stdout.write(self.style.SUCCESS(AppMessages.OVERDUE_TASKS_MARKED.format(len(marked_ids))))
