import logging

from django.core.management.base import BaseCommand

from workboard.constants.messages import AppMessages
from workboard.repositories.team_member_repository import TeamMemberRepository

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Re-key team member documents stored under a legacy id to the authentication subject id in their uid field."

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="List the documents that would be re-keyed without changing anything",
        )

    def handle(self, *args, **options):
        legacy_documents = TeamMemberRepository.find_legacy_documents()
        if not legacy_documents:
            self.stdout.write(self.style.SUCCESS("No legacy team member documents found."))
            return

        rekeyed = 0
        for document in legacy_documents:
            old_id, new_id = document["_id"], document["uid"]
            if options["dry_run"]:
                self.stdout.write(f"Would re-key {old_id} -> {new_id}")
                continue

            TeamMemberRepository.rekey(document, new_id)
            logger.info(f"Re-keyed team member {old_id} to {new_id}")
            rekeyed += 1

        self.stdout.write(self.style.SUCCESS(AppMessages.MEMBER_IDS_MIGRATED.format(rekeyed)))
