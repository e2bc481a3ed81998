from flask import current_app, jsonify, request
from . import api_bp
from ..constant import EXCEPTION_FIELD, FormField
from ..services.member_tasks import AddMemberForm
from ..utils.hobbies import hobby_choices, load_catalog

GENERIC_FAILURE_MESSAGE = "Registration failed, please try again later"


def _submitted_data() -> dict:
	# 兼容 JSON 与 HTML 表单提交，只取表单定义的字段
	received = request.get_json(silent=True)
	if not isinstance(received, dict):
		received = request.form.to_dict()
	return {field.value: received.get(field.value) for field in FormField}


@api_bp.get("/members/hobbies")
def list_hobbies():
	'''
	返回格式：
	{
		"success": 1,
		"hobbies": [{"id": 1, "label": "Reading"}, ...]
	}
	'''
	return jsonify({"success": 1, "hobbies": hobby_choices(load_catalog())}), 200


@api_bp.post("/members/add")
def add_member():
	'''
	通信数据格式：
	发送格式（JSON 或表单）：
	{
		"email": "xxxx",
		"password": "xxxx",
		"name": "xxxx",
		"nickname": "xxxx",
		"hobby1": 1,
		"hobby2": 2 | "",
		"hobby3": 3 | ""
	}
	返回格式：
	{
		"success": [0|1],
		"message": "xxxx",
		["member": {...}],
		["errors": {"field": {"code": "message"}}]
	}
	'''
	form = AddMemberForm(load_catalog(), current_app.config.get("ERROR_MESSAGES"))
	if form.execute(_submitted_data()):
		return jsonify({
			"success": 1,
			"message": "Registration successful",
			"member": form.member.to_dict(),
		}), 201

	errors = dict(form.errors())
	if EXCEPTION_FIELD in errors:
		# 诊断信息已写入日志，不返回给用户
		errors.pop(EXCEPTION_FIELD)
		return jsonify({"success": 0, "message": GENERIC_FAILURE_MESSAGE, "errors": errors}), 500

	return jsonify({
		"success": 0,
		"message": "There was a problem with your input",
		"errors": errors,
	}), 400
