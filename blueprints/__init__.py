from flask import Blueprint

api_bp = Blueprint("api", __name__, url_prefix="/api")


def register_blueprints(app):
	# 导入路由模块以挂载视图函数
	from . import member_api  # noqa: F401
	app.register_blueprint(api_bp)
