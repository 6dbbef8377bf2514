from django.core.management.base import BaseCommand

from madrasa_app.models import Tenant


class Command(BaseCommand):
    help = 'Create the default tenant for single-tenant deployments'

    def add_arguments(self, parser):
        parser.add_argument('--name', default='Nizam-e-Taleem')

    def handle(self, *args, **options):
        tenant, created = Tenant.objects.get_or_create(
            name=options['name'],
            defaults={
                'is_active': True,
                'primary_language': 'en',
                'timezone': 'Asia/Kolkata',
                'currency': 'INR',
                'academic_year': '2024-25',
                'plan': 'premium',
            },
        )
        if not created:
            self.stdout.write(self.style.WARNING(
                f"Default tenant already exists: {tenant.pk} "
                f"(demo mode: {tenant.demo_mode}, demo data loaded: {tenant.demo_data_loaded})"
            ))
            return

        self.stdout.write(self.style.SUCCESS(f"Default tenant created: {tenant.pk} ({tenant.name})"))
        self.stdout.write('Next: enable demo mode or create an admin with --tenant ' + str(tenant.pk))
