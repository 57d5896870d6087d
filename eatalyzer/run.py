import os

from eatalyzer import create_app
from eatalyzer.config.settings import get_config_class

# Create the Flask application
app = create_app(get_config_class(os.getenv("FLASK_CONFIG")))

def main():
    port = int(os.getenv("PORT", "5000"))
    app.run(host="0.0.0.0", port=port, debug=False, use_reloader=False)

if __name__ == "__main__":
    main()
