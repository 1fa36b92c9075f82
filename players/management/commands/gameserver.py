from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = "Run the game server that handles the /player/ REST endpoints."

    def add_arguments(self, parser):
        parser.add_argument(
            "-p", "--port", type=int, default=settings.GAME_SERVER_PORT,
            help=f"listens on PORT for requests. Uses {settings.GAME_SERVER_PORT} if not specified",
        )
        parser.add_argument("--host", default="0.0.0.0")

    def handle(self, *args, **options):
        address = f"{options['host']}:{options['port']}"
        self.stdout.write(self.style.SUCCESS(f"Game server listening on {address}"))
        # the store is in memory, a reloader would restart it empty
        call_command("runserver", address, use_reloader=False)


# Run with: python manage.py gameserver -p 8765
