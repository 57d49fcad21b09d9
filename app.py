"""Development entry point.

    export FLASK_APP=app
    export FLASK_ENV=development
    flask run
"""
from employee_records import create_app

app = create_app()

if __name__ == '__main__':
    app.run(debug=app.config.get('DEBUG', False))
