"""
Management commands

    flask --app app create-admin admin2@example.com "Second Admin"
    flask --app app set-active member@example.com --inactive
"""

import click

from portal.errors import PortalError
from portal.services import get_services


def register_commands(app):

    @app.cli.command('create-admin')
    @click.argument('email')
    @click.argument('name')
    @click.password_option()
    def create_admin(email, name, password):
        """Create an administrator account."""
        try:
            account = get_services().accounts.create_admin(name, email, password)
        except PortalError as e:
            raise click.ClickException(e.message)
        total = get_services().accounts.count_admins()
        click.echo(f'New admin account created: {account.email} ({total} administrators)')

    @app.cli.command('set-active')
    @click.argument('email')
    @click.option('--active/--inactive', default=True)
    def set_active(email, active):
        """Activate or deactivate an account by email."""
        services = get_services()
        account = services.accounts.find_by_identity(email)
        if account is None:
            raise click.ClickException(f'No account for {email}')
        services.accounts.set_active(account.id, active)
        state = 'active' if active else 'inactive'
        click.echo(f'{account.email} is now {state}')
