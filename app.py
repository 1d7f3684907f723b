"""Entry point: `flask --app app run`."""

from src.brigade_pay.brigade_pay.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run()
