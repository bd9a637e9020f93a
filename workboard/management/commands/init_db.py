from django.core.management.base import BaseCommand

from workboard_project.db.init import initialize_database


class Command(BaseCommand):
    help = "Check the MongoDB connection and create the indexes the application relies on"

    def handle(self, *args, **options):
        self.stdout.write(self.style.SUCCESS("Initializing database..."))

        if initialize_database():
            self.stdout.write(self.style.SUCCESS("Database initialization completed successfully!"))
        else:
            self.stdout.write(self.style.ERROR("Database initialization failed!"))
