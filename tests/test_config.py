from zimu.config import Settings


def test_defaults():
    config = Settings()

    assert config.APP_NAME == "zimu"
    assert config.INPUT_ENCODING == "utf-8"
    assert config.OUTPUT_ENCODING == "utf-8"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ZIMU_INPUT_ENCODING", "gbk")
    monkeypatch.setenv("ZIMU_LOG_LEVEL", "DEBUG")

    config = Settings()

    assert config.INPUT_ENCODING == "gbk"
    assert config.LOG_LEVEL == "DEBUG"
