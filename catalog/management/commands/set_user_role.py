"""Grant or revoke a role from the command line.

Used to bootstrap the first admin, since role changes over HTTP require an
admin caller.
"""

from django.core.management.base import BaseCommand

from catalog.enums import UserRole
from catalog.repositories import UserRepository
from catalog.services.user_service import user_service


class Command(BaseCommand):
    help = "Set the role of a user by uid, creating the profile if needed"

    def add_arguments(self, parser):
        parser.add_argument("uid", help="Firebase uid of the user")
        parser.add_argument(
            "role",
            choices=[role.value for role in UserRole],
            help="Role to assign",
        )
        parser.add_argument(
            "--email",
            default="",
            help="Email stored when the profile has to be created",
        )

    def handle(self, *args, **options):
        uid = options["uid"]
        _, created = UserRepository.get_or_create(uid, email=options["email"])
        if created:
            self.stdout.write(f"Created profile for {uid}")

        profile = user_service.set_role(uid, options["role"])
        self.stdout.write(
            self.style.SUCCESS(f"User {profile.id} now has role {profile.role}")
        )
