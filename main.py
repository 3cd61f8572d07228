from relay.config import Settings
from relay.controller import create_app


settings = Settings.from_env().validate()
app = create_app(settings)

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=settings.app_port, debug=settings.debug_mode)
