from django.apps import AppConfig


class PlayersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "players"

    def ready(self):
        from .store import InMemoryPlayerStore

        # one store per server process, handed to the views
        self.store = InMemoryPlayerStore()
