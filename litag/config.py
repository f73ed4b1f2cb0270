import os

from dotenv import load_dotenv


load_dotenv()


class BaseConfig(object):
    DEBUG = False
    TESTING = False
    APP_ENV = os.getenv("APP_ENV", "development")
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///litag.db")
    DATABASE_ECHO = os.getenv("DATABASE_ECHO", "false").lower() in ("1", "true", "yes")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "8080"))


class DevelopmentConfig(BaseConfig):
    DEBUG = True


class TestingConfig(BaseConfig):
    TESTING = True
    DATABASE_URL = "sqlite://"


class ProductionConfig(BaseConfig):
    HOST = os.getenv("HOST", "0.0.0.0")


_configs = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config(name=None):
    if name is None:
        name = os.getenv("APP_ENV", "development")

    try:
        return _configs[name]
    except KeyError:
        raise ValueError("unknown configuration: {}".format(name))
