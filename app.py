"""Run the attendance API: ``python app.py`` (APP_ENV selects the settings)."""

from src.smart_attendance.smart_attendance.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=app.config["PORT"], threaded=True)
