import pytest

from .. import create_app
from ..extensions import db


##################################
#单元测试创建运行环境（内存 SQLite）
@pytest.fixture(scope="session")
def app():
    app = create_app("testing")
    with app.app_context():
        # 确保模型已导入，再建表
        from ..models import member, member_profile, member_hobby  # noqa: F401
        yield app


# 每个测试独立建表、清表
@pytest.fixture(autouse=True)
def _db(app):
    with app.app_context():
        db.create_all()
        yield db
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def catalog(app):
    return dict(app.config["HOBBIES"])


@pytest.fixture()
def valid_data():
    return {
        "email": "test@example.jp",
        "password": "123456",
        "name": "テスト太郎",
        "nickname": "taro",
        "hobby1": 1,
        "hobby2": 2,
        "hobby3": 3,
    }
##################################
