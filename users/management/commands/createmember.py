"""Management command to create a member who can sign in and book events."""

from typing import Any

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandParser

from users.models import CustomUser, InvalidEmailError


class Command(BaseCommand):
    """
    Django command to create a member account.

    Without ``--password`` the member gets an unusable password and must have one set by staff
    (or through password reset) before signing in.
    """

    help = "Create a member with the specified email address"

    def add_arguments(self, parser: CommandParser) -> None:
        """Add command line arguments."""
        parser.add_argument(
            "--email",
            type=str,
            required=True,
            help="Email address for the new member",
        )
        parser.add_argument("--password", type=str, default="", help="Initial password")
        parser.add_argument("--first-name", type=str, default="", help="First name")
        parser.add_argument("--last-name", type=str, default="", help="Last name")
        parser.add_argument(
            "--staff",
            action="store_true",
            help="Give the member access to the admin site and event bookings",
        )

    def handle(self, *args: Any, **options: Any) -> None:
        """Create the member and report the outcome."""
        User = get_user_model()  # noqa: N806
        email = options["email"]

        try:
            user: CustomUser = User.objects.create_user(
                email=email,
                password=options["password"] or None,
                first_name=options["first_name"],
                last_name=options["last_name"],
                is_staff=options["staff"],
                is_active=True,
            )
        except InvalidEmailError:
            self.stdout.write(
                self.style.ERROR(f"Invalid or already registered email: {email}"),
            )
            raise

        self.stdout.write(
            self.style.SUCCESS(f"Successfully created member with email: {user.email}"),
        )
