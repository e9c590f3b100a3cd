from django.core.management.base import BaseCommand

from policies.option import PoliciesOption


class Command(BaseCommand):
    help = "Deletes the stored feature policy overrides so every feature uses its default"

    def handle(self, *args, **kwargs):
        if PoliciesOption().delete_option():
            self.stdout.write(
                self.style.SUCCESS("Successfully reset feature policies to their defaults.")
            )
        else:
            self.stdout.write("No stored feature policies to reset.")
