import os
import sys
from importlib import import_module

pkg_dir = os.path.dirname(os.path.abspath(__file__))
parent_dir = os.path.dirname(pkg_dir)
if parent_dir not in sys.path:
	sys.path.insert(0, parent_dir)

package_name = os.path.basename(pkg_dir)
try:
	create_app = import_module(package_name).create_app
except ImportError:
	create_app = import_module("member_registration").create_app

app = create_app(os.getenv("APP_ENV"))

if __name__ == "__main__":
	debug = os.getenv("FLASK_DEBUG", "1") == "1"
	app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
