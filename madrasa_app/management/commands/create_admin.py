from django.core.management.base import BaseCommand, CommandError

from madrasa_app.models import Admin, Tenant


class Command(BaseCommand):
    help = 'Create the initial admin user (does nothing if the username exists)'

    def add_arguments(self, parser):
        parser.add_argument('--username', default='admin')
        parser.add_argument('--email', default='admin@madrasa.com')
        parser.add_argument('--password', default='admin123')
        parser.add_argument('--name', default='Administrator')
        parser.add_argument('--tenant', type=int, help='Tenant id the admin belongs to')

    def handle(self, *args, **options):
        username = options['username']
        if Admin.objects.filter(username=username).exists():
            self.stdout.write(self.style.WARNING(f"Admin user '{username}' already exists"))
            return

        tenant = None
        if options['tenant'] is not None:
            tenant = Tenant.objects.filter(pk=options['tenant']).first()
            if tenant is None:
                raise CommandError(f"Tenant {options['tenant']} does not exist")

        if len(options['password']) < 6:
            raise CommandError('Password must be at least 6 characters')

        Admin.objects.create_user(
            username=username,
            email=options['email'],
            password=options['password'],
            name=options['name'],
            role='admin',
            tenant=tenant,
            is_staff=True,
        )
        self.stdout.write(self.style.SUCCESS(f"Admin user '{username}' created successfully"))
        self.stdout.write('Please change the password after first login.')
