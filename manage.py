from flask.cli import FlaskGroup
from app import create_app

# `python manage.py db upgrade`, `python manage.py checkin verify`, ...
cli = FlaskGroup(create_app=create_app)

if __name__ == "__main__":
    cli()
