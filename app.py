import os

from burganhome.app.factory import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host=app.config["APP_HOST"], port=int(os.getenv("PORT", app.config["APP_PORT"])), debug=True)
