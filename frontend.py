"""Run the browser frontend: ``python frontend.py``. It calls the API at API_URL."""

from src.smart_attendance.smart_attendance.main import create_frontend_app

app = create_frontend_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=app.config["FRONTEND_PORT"], threaded=True)
