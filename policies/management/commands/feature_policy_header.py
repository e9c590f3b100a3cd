from django.core.management.base import BaseCommand

from policies.catalog import default_catalog
from policies.headers import HEADER_NAME, build_directive
from policies.option import PoliciesOption


class Command(BaseCommand):
    help = "Prints the Feature-Policy header sent with every response"

    def add_arguments(self, parser):
        parser.add_argument(
            "--defaults",
            action="store_true",
            help="Ignore stored overrides and print the catalog defaults.",
        )

    def handle(self, *args, **options):
        option = {} if options["defaults"] else PoliciesOption().get_option()
        directive = build_directive(default_catalog(), option)

        if not directive:
            self.stdout.write(self.style.WARNING(f"No {HEADER_NAME} header is sent."))
            return

        self.stdout.write(f"{HEADER_NAME}: {directive}")
