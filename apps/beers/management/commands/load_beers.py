import json

from django.core.management.base import BaseCommand, CommandError

from apps.beers.application.dependencies import get_beer_service
from apps.beers.application.loader import load_beers


class Command(BaseCommand):
    help = 'Create beers from a JSON file holding a list of beer objects'

    def add_arguments(self, parser):
        parser.add_argument(
            'path',
            type=str,
            help='Path to the JSON file'
        )

    def handle(self, **options):
        path = options['path']

        try:
            with open(path, encoding='utf-8') as f:
                records = json.load(f)
        except OSError as e:
            raise CommandError(f'Cannot read {path}: {e}')
        except json.JSONDecodeError as e:
            raise CommandError(f'Invalid JSON in {path}: {e}')

        if not isinstance(records, list):
            raise CommandError('The file must contain a list of beers')

        self.stdout.write(f'Loading {len(records)} beers from {path}...')

        result = load_beers(get_beer_service(), records)

        self.stdout.write(
            self.style.SUCCESS(
                f"Successfully created {len(result.created)} beers"
            )
        )
        for error in result.errors:
            self.stdout.write(self.style.WARNING(error))
