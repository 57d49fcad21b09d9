from flask_sqlalchemy import SQLAlchemy

# Single database handle; bound to the app in create_app()
db = SQLAlchemy()
