import os
from dotenv import load_dotenv
load_dotenv()
from flask import Flask, jsonify
from flask_cors import CORS
from flask_migrate import Migrate
from config import config_dict, ProdConfig
from models import db
from routes.authentication import auth_bp
from routes.lessons import lesson_bp
from routes.frontend import frontend_bp
from commands import checkin_cli, users_cli

migrate = Migrate()


def create_app(env=None, overrides=None):
    app = Flask(__name__)

    env = (env or os.environ.get("FLASK_ENV", "production")).lower()
    app.config.from_object(config_dict.get(env, ProdConfig))
    if overrides:
        app.config.update(overrides)
    if app.config["SQLALCHEMY_DATABASE_URI"].startswith("sqlite"):
        # pool sizing only applies to server databases
        app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {}

    CORS(app, resources={r"/api/*": {"origins": app.config["FRONTEND_ORIGIN"], "supports_credentials": True}})

    db.init_app(app)
    migrate.init_app(app, db)

    @app.route('/')
    def home():
        return "Welcome to the Music School check-in API!"

    @app.route('/health')
    def health():
        return jsonify({"status": "ok"})

    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(lesson_bp, url_prefix='/api')
    app.register_blueprint(frontend_bp, url_prefix='/api')
    app.cli.add_command(checkin_cli)
    app.cli.add_command(users_cli)

    if not app.testing:
        print("Environment:", env)
        print("Loaded DB URI:", app.config.get("SQLALCHEMY_DATABASE_URI"))

    return app

app = create_app()

if __name__ == '__main__':
    app.run(debug=app.config.get('DEBUG', False), port=int(os.getenv("PORT", 3335)))
