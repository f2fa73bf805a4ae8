import click
from flask import current_app
from flask.cli import with_appcontext
from hms.extensions import db
from hms.models.user_models import User, Role, Gender
from hms.utils.validators import parse_date


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create all database tables."""
    # Imported for its side effect of registering every model on the metadata
    from hms import models  # noqa: F401

    db.create_all()
    click.echo("Database initialized successfully!")


@click.command('create-admin')
@click.option('--first-name', prompt=True)
@click.option('--last-name', prompt=True)
@click.option('--email', prompt=True)
@click.option('--phone', prompt=True)
@click.option('--nic', prompt=True)
@click.option('--dob', prompt='Date of birth (YYYY-MM-DD)')
@click.option('--gender', prompt=True, type=click.Choice([g.value for g in Gender]))
@click.password_option()
@with_appcontext
def create_admin_command(first_name, last_name, email, phone, nic, dob, gender, password):
    """Create the first dashboard admin; later admins are added through the API."""
    admin = User(
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone=phone,
        nic=nic,
        dob=parse_date(dob),
        gender=Gender(gender),
        role=Role.ADMIN
    )
    errors = admin.validate(password=password)
    if errors:
        raise click.ClickException(' '.join(errors))
    if User.query.filter_by(email=email).first():
        raise click.ClickException('Admin With This Email Already Exists!')

    admin.set_password(password)
    db.session.add(admin)
    db.session.commit()
    current_app.logger.info(f"Admin created from CLI: user_id={admin.id}")
    click.echo(f"Admin {admin.full_name} created with id {admin.id}.")


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(create_admin_command)
